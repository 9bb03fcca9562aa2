from math import log

from brentsolver.solver import BrentSolver, find_root


def linear(x: float) -> float:
    return 2 * x + 10


def quadratic(x: float) -> float:
    return 2 * x * x + 5 * x - 3


def log_nested(x: float) -> float:
    return 93.3519196629417 - (-237300 * log(0.001638 * x) / (1000 * log(0.001638 * x) - 17269))


def run_user_guide_examples() -> dict:
    solver = BrentSolver()
    results = {}

    results["linear"] = solver.find_root(linear)
    print(f"Linear function root = {results['linear']}")  # -5.0

    results["quadratic_first"] = solver.find_root(quadratic)
    print(f"Quadratic function 1st root = {results['quadratic_first']}")  # -3.0

    # Second root 0.5 lies between -1 and 2; function is already set.
    solver.set_counterpart_points(-1, 2)
    results["quadratic_second"] = solver.find_root()
    print(f"Quadratic function 2nd root = {results['quadratic_second']}")  # 0.5

    # Points -1 and 2 are orders of magnitude away from the root at 80000,
    # so widen the search scope first.
    results["log_nested"] = solver.find_root(log_nested, 20000, 200000)
    print(f"Nested log function root = {results['log_nested']}")

    # f(100000) and f(200000) share a sign; bracket repair sorts it out.
    results["log_nested_repaired"] = solver.find_root(log_nested, 100000, 200000)
    print(f"Nested log function root = {results['log_nested_repaired']}")

    results["quick"] = find_root(linear, -10, 10)
    print(results["quick"])  # -5.0
    return results


if __name__ == "__main__":
    from brentsolver.logging_config import enable_console_logging

    enable_console_logging(level="DEBUG")
    run_user_guide_examples()

from .exceptions import InvariantViolation


def assert_dense_order(orders):
    """display_order values must be exactly 0..n-1."""
    orders = list(orders)
    if not orders:
        return

    expected = list(range(len(orders)))
    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Display orders are not consecutive starting from 0: {sorted(orders)}"
        )

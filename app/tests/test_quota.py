from core.quota import QuotaLimiter


def test_budget_is_per_caller():
    limiter = QuotaLimiter(points=1, duration=60)
    assert limiter.consume("10.0.0.1")
    assert not limiter.consume("10.0.0.1")
    assert limiter.consume("10.0.0.2")

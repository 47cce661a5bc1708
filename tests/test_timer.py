from apiengine.timer import EngineTimer


def fake_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_delta_starts_at_zero():
    assert EngineTimer(fake_clock([1.0])).delta_time == 0.0


def test_end_returns_interval_between_checks():
    times = [1.0, 3.0, 4.5]
    timer = EngineTimer(fake_clock(times))
    assert timer.end() == times[1] - times[0]
    assert timer.end() == times[2] - times[1]


def test_time_check_updates_delta():
    times = [2.0, 2.25]
    timer = EngineTimer(fake_clock(times))
    timer.time_check()
    assert timer.delta_time == times[1] - times[0]


def test_time_start_discards_elapsed_time():
    times = [0.0, 100.0, 100.5]
    timer = EngineTimer(fake_clock(times))
    timer.time_start()
    assert timer.end() == times[2] - times[1]


def test_deltas_sum_to_total():
    times = [0.5, 0.75, 1.5, 2.0, 4.0]
    timer = EngineTimer(fake_clock(times))
    total = sum(timer.end() for _ in range(len(times) - 1))
    assert total == times[-1] - times[0]


def test_real_clock_is_non_negative():
    timer = EngineTimer()
    assert timer.end() >= 0.0
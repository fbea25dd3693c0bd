import pytest

from rtdata.timing import Duration, Timestamp, TimeUnit


def test_duration_conversion():
    test = Duration.of(1_000_000_000, TimeUnit.NANOSECONDS)
    assert test.to_seconds() == 1
    assert test.to_millis() == 1000
    assert test.to_micros() == 1_000_000
    assert test.to_nanos() == 1_000_000_000


def test_duration_between_points():
    d = Duration(250, 1_250)
    assert d.to_nanos() == 1_000
    assert d.to_micros() == 1
    assert d.to_millis() == 0


def test_duration_of_seconds():
    assert Duration.of(3, TimeUnit.SECONDS).to_nanos() == 3_000_000_000


@pytest.mark.parametrize(
    "value, original, destination, expected",
    [
        (1, TimeUnit.SECONDS, TimeUnit.MILLISECONDS, 1000),
        (1500, TimeUnit.MILLISECONDS, TimeUnit.SECONDS, 1),
        (999, TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS, 0),
        (2, TimeUnit.MICROSECONDS, TimeUnit.NANOSECONDS, 2000),
    ],
)
def test_time_unit_convert(value, original, destination, expected):
    assert TimeUnit.convert(value, original, destination) == expected


def test_time_unit_rejects_zero():
    with pytest.raises(ValueError):
        TimeUnit(0)


def test_timestamp_seconds():
    assert Timestamp(1_000_000_000).to_seconds() == 1


def test_timestamp_millis():
    assert Timestamp(1_000_000).to_millis() == 1


def test_timestamp_micros():
    assert Timestamp(1000).to_micros() == 1


def test_timestamp_nanos():
    assert Timestamp(1).to_nanos() == 1


def test_timestamp_difference_is_duration():
    test = Timestamp(100) - Timestamp.EPOCH
    assert isinstance(test, Duration)
    assert test.to_nanos() == 100


def test_timestamp_comparators():
    now = Timestamp.now()
    assert now > Timestamp.EPOCH
    assert Timestamp.EPOCH < now
    assert now == now
    assert not (now < now)


def test_timestamp_arithmetic():
    assert Timestamp(100).plus(100, TimeUnit.NANOSECONDS).to_nanos() == 200
    assert Timestamp(200).minus(100, TimeUnit.NANOSECONDS).to_nanos() == 100


def test_timestamp_plus_and_minus_duration():
    d = Duration.of(5, TimeUnit.MICROSECONDS)
    t = Timestamp(1_000)
    assert (t + d).to_nanos() == 6_000
    assert ((t + d) - d) == t


def test_from_duration():
    assert Timestamp.from_duration(2, TimeUnit.MILLISECONDS).to_nanos() == 2_000_000


def test_equal_timestamps_hash_equally():
    assert hash(Timestamp(42)) == hash(Timestamp(42))
    assert len({Timestamp(42), Timestamp(42), Timestamp(43)}) == 2


def test_minus_wraps_like_unsigned():
    assert Timestamp(0).minus(1, TimeUnit.NANOSECONDS).to_nanos() == (1 << 64) - 1


def test_compare_with_other_type_is_not_equal():
    assert (Timestamp(1) == 1) is False
    with pytest.raises(TypeError):
        Timestamp(1) < 2
import math

import pytest

from soundchip.envelope import Envelope, EnvelopePreset, get_loop_position
from soundchip.errors import InvalidEnvelopeError
from soundchip.knot import Interpolation, Knot, LoopEcho, LoopNone, LoopPoints, LoopRepeat
from soundchip.presets.knots import KNOTS_VOL_DOWN
from soundchip.soundmath import lerp
from soundchip.values import Normal

F32_EPSILON = 1.1920929e-07


def _generate_index(time, loop_in, loop_out, repeat, round_up):
    if time <= loop_in:
        return 0
    if time == loop_in:
        return int(loop_in)
    if time == loop_out:
        return int(loop_out)
    if not repeat and time > loop_out:
        return int(loop_out)
    result = get_loop_position(time, loop_in, loop_out) - loop_in
    return math.ceil(result) if round_up else math.floor(result)


def _generate(min_time, min_value, max_value, length):
    knots = []
    time = min_time
    for i in range(length):
        x = i / (length - 1)
        value = lerp(min_value, max_value, x)
        time += 1.0
        knots.append(Knot(time, value))
    return Envelope.from_knots(knots, float)


def _check_envelope(env, start_time, end_time, delta):
    time = start_time
    first = env.knots[0]
    last = env.knots[len(env) - 1]
    repeat = env.loop_kind == LoopRepeat()
    checked = 0
    while time <= end_time:
        a = _generate_index(time, first.time, last.time, repeat, False)
        b = _generate_index(time + delta, first.time, last.time, repeat, True)
        if b < a:
            b = int(last.time)
        local_time = get_loop_position(time, first.time, last.time)
        if b > len(env) - 1:
            break
        a_time = env.knots[a].time
        goal = lerp(env.knots[a].value, env.knots[b].value, local_time - a_time)
        value = env.peek(time)
        assert abs(value - goal) < F32_EPSILON * 2.0
        checked += 1
        time += delta
    return checked


def test_envelope_interpolation_matches_reference():
    above_zero = _generate(1.0, 1.0, 0.0, 7)
    from_zero = _generate(0.0, 0.5, 0.0, 8)
    assert _check_envelope(from_zero, 0.0, 35.0, 0.125) > 0
    assert _check_envelope(above_zero, 0.0, 30.0, 0.25) > 0
    assert _check_envelope(from_zero.set_loop(LoopRepeat()), 0.0, 15.0, 0.25) > 0
    assert _check_envelope(above_zero.set_loop(LoopRepeat()), 0.0, 15.0, 0.25) > 0


def test_envelope_sort():
    knots = [
        Knot(5.0, 4.0),
        Knot(0.0, 0.0),
        Knot(1.0, 1.0),
        Knot(2.0, 3.0),
        Knot(1.5, 2.0),
    ]
    env = Envelope.from_knots(knots, float)
    times = [k.time for k in env.knots]
    assert all(a < b for a, b in zip(times, times[1:]))

    env.knots.append(Knot(2.5, 1.0))
    env.knots.append(Knot(2.75, 1.0))
    env.sort_by_time()
    times = [k.time for k in env.knots]
    assert times == [0.0, 1.0, 1.5, 2.0, 2.5, 2.75, 5.0]


def _ramp(loop_kind=None):
    knots = [Knot(float(i), float(i)) for i in range(4)]
    env = Envelope.from_knots(knots, float)
    return env.set_loop(loop_kind) if loop_kind is not None else env


def test_default_envelope_goes_from_one_to_zero():
    env = Envelope()
    assert len(env) == 2
    assert env.peek(0.0) == 1.0
    assert env.peek(0.5) == pytest.approx(0.5)
    assert env.peek(2.0) == 0.0
    assert env.loop_kind == LoopNone()


def test_no_loop_holds_first_and_last_values():
    env = _ramp()
    assert env.peek(-1.0) == 0.0
    assert env.peek(1.5) == pytest.approx(1.5)
    assert env.peek(10.0) == 3.0


def test_repeat_wraps_time():
    env = _ramp(LoopRepeat())
    assert env.peek(3.0) == 3.0
    assert env.peek(4.5) == pytest.approx(1.5)
    assert env.peek(7.25) == pytest.approx(1.25)


def test_loop_points_sustain_then_release():
    env = _ramp(LoopPoints(1, 2))
    assert env.peek(2.5) == pytest.approx(1.5)
    assert env.peek(5.0) == pytest.approx(1.0)
    env.release()
    assert env.peek(5.25) == pytest.approx(1.25)
    assert env.peek(6.25) == pytest.approx(2.25)
    assert env.peek(10.0) == 3.0


def test_reset_restores_sustain():
    env = _ramp(LoopPoints(1, 2))
    env.release()
    env.peek(5.25)
    assert env.peek(10.0) == 3.0
    env.reset()
    assert env.peek(5.0) == pytest.approx(1.0)


def test_echo_attenuates_repeats():
    env = _ramp(LoopEcho(1, 2, Normal.HALF))
    decay = float(Normal.HALF)
    env.release()
    assert env.peek(5.0) == pytest.approx(1.0)
    assert env.peek(7.5) == pytest.approx(0.5 * decay)
    assert env.peek(11.5) == pytest.approx(1.5 * decay / 2)


def test_step_interpolation_holds_value():
    knots = [
        Knot(0.0, 1.0, Interpolation.STEP),
        Knot(1.0, 0.5, Interpolation.STEP),
        Knot(2.0, 0.0, Interpolation.STEP),
    ]
    env = Envelope.from_knots(knots)
    assert env.peek(0.5) == 1.0
    assert env.peek(1.5) == 0.5
    assert env.peek(2.0) == 0.0


def test_normal_envelope_infers_type():
    env = Envelope.from_knots(KNOTS_VOL_DOWN)
    assert env.value_type is Normal
    assert env.peek(0.25) == pytest.approx(0.75, abs=1e-4)


def test_conversion_clips_values():
    env = Envelope.from_knots([Knot(0.0, -0.5), Knot(1.0, 2.0)], Normal)
    assert env.knots[0].value == Normal.ZERO
    assert env.knots[1].value == Normal.ONE


def test_offset_values_for_floats():
    env = _ramp().offset_values(1.0)
    assert [k.value for k in env.knots] == [1.0, 2.0, 3.0, 4.0]


def test_offset_is_clipped_for_normal():
    env = Envelope.from_knots([Knot(0.0, 0.5), Knot(1.0, 0.5)], Normal)
    shifted = env.offset_values(-0.25)
    assert shifted.knots == env.knots


def test_scale_values_and_time():
    env = _ramp().scale_values(2.0).scale_time(0.5)
    assert [k.value for k in env.knots] == [0.0, 2.0, 4.0, 6.0]
    assert [k.time for k in env.knots] == [0.0, 0.5, 1.0, 1.5]


def test_builders_return_copies():
    env = _ramp()
    scaled = env.scale_time(2.0)
    assert env.knots[-1].time == 3.0
    assert scaled.knots[-1].time == 6.0


def test_from_preset():
    preset = EnvelopePreset(KNOTS_VOL_DOWN, time_scale=2.0, loop_kind=LoopRepeat())
    env = Envelope.from_preset(preset)
    assert env.loop_kind == LoopRepeat()
    assert env.value_type is Normal
    assert [k.time for k in env.knots] == [0.0, 1.0, 2.0]
    assert env.peek(0.0) == 1.0


def test_peek_on_empty_envelope_raises():
    env = Envelope.from_knots([], float)
    with pytest.raises(InvalidEnvelopeError):
        env.peek(0.5)


@pytest.mark.parametrize(
    "t, loop_in, loop_out, expected",
    [
        (5.0, 1.0, 2.0, 1.0),
        (1.5, 1.0, 2.0, 1.5),
        (3.0, 2.0, 2.0, 2.0),
        (7.25, 1.0, 7.0, 1.25),
    ],
)
def test_get_loop_position(t, loop_in, loop_out, expected):
    assert get_loop_position(t, loop_in, loop_out) == pytest.approx(expected)
from analog_clock.primitives import Line
from analog_clock.state import CLOCK_RADIUS
from analog_clock.style import ClockStyle
from analog_clock.surface import MeasureMode, MeasureSpec, resolve_size
from analog_clock.view import ClockView


def _view(host, fixed_time, **kwargs):
    return ClockView(host.schedule_callback, host.invalidate, clock=lambda: fixed_time, **kwargs)


def test_geometry_follows_size_changes(host, fixed_time):
    view = _view(host, fixed_time)
    assert view.geometry.radius == 0
    view.on_size_changed(200, 300)
    assert (view.geometry.radius, view.geometry.center_x, view.geometry.center_y) == (100, 100, 150)


def test_frame_request_samples_time_and_rearms(host, fixed_time):
    view = _view(host, fixed_time, refresh_period_ms=180)
    view.on_size_changed(200, 300)

    frame = view.on_frame_requested()
    assert len(frame) == 77
    assert view.last_sample == fixed_time
    assert [delay for delay, _ in host.requests] == [180]

    host.fire_next()
    assert host.invalidations == 1


def test_n_frames_issue_n_rearms(host, fixed_time):
    view = _view(host, fixed_time)
    for _ in range(7):
        view.on_frame_requested()
    assert view.scheduler.rearm_count == 7
    assert len(host.requests) == 7


def test_compose_frame_does_not_arm(host, fixed_time):
    view = _view(host, fixed_time)
    view.compose_frame()
    assert host.requests == []


def test_unsized_view_paints_degenerate_frame(host, fixed_time):
    frame = _view(host, fixed_time).on_frame_requested()
    assert all(p.length == 0 for p in frame if isinstance(p, Line))


def test_color_properties_and_set_style(host, fixed_time):
    view = _view(host, fixed_time)
    view.clock_face_background_color = 0x33FF0000
    assert view.style.clock_face_background_color == 0x33FF0000
    view.set_style(secondHandColor="#00FF00")
    assert view.second_hand_color == 0xFF00FF00


def test_style_change_applies_to_next_frame(host, fixed_time):
    view = _view(host, fixed_time)
    view.on_size_changed(100, 100)
    view.border_color = 0xFF00FF00
    assert view.on_frame_requested()[1].color == 0xFF00FF00


def test_save_and_restore(host, fixed_time):
    defaults = ClockStyle(dot_color=0xFF111111)
    original = _view(host, fixed_time, style=defaults)
    original.on_size_changed(400, 250)
    original.hour_hand_color = 0xFF222222
    snapshot = original.save_state({"preset": "default"})

    recreated = _view(host, fixed_time, style=defaults)
    view_state = recreated.restore_state(snapshot)
    assert view_state == {"preset": "default"}
    assert recreated.geometry.radius == 125.0
    assert recreated.style == original.style


def test_restore_corrupt_snapshot_uses_defaults(host, fixed_time):
    defaults = ClockStyle(dot_color=0xFF111111)
    view = _view(host, fixed_time, style=defaults)
    view.dot_color = 0xFF999999
    view.restore_state({CLOCK_RADIUS: None, "dotColor": []})
    assert view.style == defaults
    assert view.geometry.radius == 0.0


def test_measure_uses_preferred_size_hint(host, fixed_time):
    view = _view(host, fixed_time, default_size_px=300)
    assert view.measure() == (300, 300)
    assert view.measure(MeasureSpec(MeasureMode.EXACTLY, 1000),
                        MeasureSpec(MeasureMode.AT_MOST, 240)) == (1000, 240)


def test_resolve_size():
    assert resolve_size(300, None) == 300
    assert resolve_size(300, MeasureSpec(MeasureMode.UNSPECIFIED, 10)) == 300
    assert resolve_size(300, MeasureSpec(MeasureMode.AT_MOST, 500)) == 300
    assert resolve_size(300, MeasureSpec(MeasureMode.EXACTLY, 500)) == 500


def test_restore_rejects_radius_larger_than_surface(host, fixed_time):
    view = _view(host, fixed_time)
    view.on_size_changed(300, 300)
    view.restore_state({CLOCK_RADIUS: 1e7})
    assert view.geometry.radius == 0.0
    assert len(view.on_frame_requested()) == 77

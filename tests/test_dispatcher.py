"""Tests for ToolDispatcher: clamping, coercion, fallbacks and error flattening."""

import pytest

from hardware_control.adapters import LinuxController, MacController, WindowsController, WslController
from hardware_control.domain.errors import CommandTimeout, ExecutionError
from hardware_control.domain.messages import BRIGHTNESS_UNSUPPORTED, is_failure
from hardware_control.domain.models import GetBrightness, OpenApp, PlaySound, SetBrightness


class TestSetBrightness:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw,applied", [(-5, 0), (150, 100), (42, 42)])
    async def test_level_clamped_before_use(self, make_dispatcher, raw, applied):
        dispatcher, runner = make_dispatcher(WindowsController)
        outcome = await dispatcher.dispatch(SetBrightness(raw))
        assert outcome.ok
        assert outcome.message == f"✅ Brightness set to {applied}%"
        assert runner.calls[0].args[1].endswith(f"WmiSetBrightness(1,{applied})")

    @pytest.mark.asyncio
    async def test_repeated_calls_are_independent(self, make_dispatcher):
        dispatcher, runner = make_dispatcher(WindowsController)
        first = await dispatcher.dispatch(SetBrightness(50))
        second = await dispatcher.dispatch(SetBrightness(50))
        assert first == second
        assert first.ok
        assert len(runner.calls) == 2
        assert runner.calls[0] == runner.calls[1]
        assert runner.calls[0] is not runner.calls[1]

    @pytest.mark.asyncio
    async def test_macos_fallback_scenario(self, make_dispatcher):
        dispatcher, runner = make_dispatcher(
            MacController,
            {"brightness": ExecutionError("cannot launch 'brightness': No such file or directory")},
        )
        outcome = await dispatcher.dispatch(SetBrightness(75))
        assert outcome.ok
        assert "75%" in outcome.message
        assert runner.programs == ["brightness", "osascript"]
        assert runner.calls[1].args[1].endswith("to 0.75")

    @pytest.mark.asyncio
    async def test_linux_without_displays_is_failure(self, make_dispatcher):
        dispatcher, _ = make_dispatcher(LinuxController, {"xrandr": ""})
        outcome = await dispatcher.dispatch(SetBrightness(20))
        assert not outcome.ok
        assert is_failure(outcome.message)
        assert "no connected displays found" in outcome.message

    @pytest.mark.asyncio
    async def test_timeout_becomes_failure(self, make_dispatcher):
        dispatcher, _ = make_dispatcher(
            WslController,
            {"powershell.exe": CommandTimeout("powershell.exe -Command ...", 30.0)},
        )
        outcome = await dispatcher.dispatch(SetBrightness(20))
        assert not outcome.ok
        assert outcome.message.startswith("❌ Error setting brightness: timed out after 30s")


class TestGetBrightness:
    @pytest.mark.asyncio
    async def test_windows(self, make_dispatcher):
        dispatcher, _ = make_dispatcher(WindowsController, {"powershell": "64\r\n"})
        outcome = await dispatcher.dispatch(GetBrightness())
        assert outcome.message == "💡 Current brightness: 64%"

    @pytest.mark.asyncio
    async def test_macos(self, make_dispatcher):
        dispatcher, _ = make_dispatcher(MacController, {"osascript": "0.8125"})
        outcome = await dispatcher.dispatch(GetBrightness())
        assert outcome.message == "💡 Current brightness: 81%"

    @pytest.mark.asyncio
    async def test_linux_unsupported_scenario(self, make_dispatcher):
        # Scripted failure proves the outcome does not depend on command state.
        dispatcher, runner = make_dispatcher(LinuxController, {"xrandr": ExecutionError("boom")})
        outcome = await dispatcher.dispatch(GetBrightness())
        assert outcome.ok
        assert outcome.warning
        assert outcome.message == BRIGHTNESS_UNSUPPORTED
        assert runner.calls == []

    @pytest.mark.asyncio
    async def test_unparsable_output_is_failure(self, make_dispatcher):
        dispatcher, _ = make_dispatcher(WindowsController, {"powershell": "Get-WmiObject : Not supported"})
        outcome = await dispatcher.dispatch(GetBrightness())
        assert not outcome.ok
        assert outcome.message.startswith("❌ Error getting brightness:")


class TestPlaySound:
    @pytest.mark.asyncio
    async def test_windows_success_scenario(self, make_dispatcher):
        dispatcher, runner = make_dispatcher(WindowsController)
        outcome = await dispatcher.dispatch(PlaySound("success"))
        assert outcome.message == "🔔 Sound 'success' played"
        [cmd] = runner.calls
        assert cmd.args[1] == "[console]::beep(1200,200)"
        assert cmd.args[1] != WindowsController(runner).sound_command("default").args[1]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sound_type", ["chime", "", None, "Alert", " beep ", "ERROR"])
    async def test_unknown_behaves_like_default(self, make_dispatcher, sound_type):
        dispatcher, runner = make_dispatcher(MacController)
        unknown = await dispatcher.dispatch(PlaySound(sound_type))
        default = await dispatcher.dispatch(PlaySound("default"))
        assert unknown == default
        assert runner.calls[0] == runner.calls[1]

    @pytest.mark.asyncio
    async def test_player_failure(self, make_dispatcher):
        dispatcher, _ = make_dispatcher(
            LinuxController,
            {"paplay": ExecutionError("paplay exited with code 1: Failed to open audio file.")},
        )
        outcome = await dispatcher.dispatch(PlaySound("beep"))
        assert outcome.message == (
            "❌ Error playing sound: paplay exited with code 1: Failed to open audio file."
        )


class TestOpenApp:
    @pytest.mark.asyncio
    async def test_success(self, make_dispatcher):
        dispatcher, runner = make_dispatcher(MacController)
        outcome = await dispatcher.dispatch(OpenApp("Safari"))
        assert outcome.message == "🚀 Application 'Safari' opened"
        assert runner.calls[0].wait_for_exit is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   "])
    async def test_blank_name_still_attempts_launch(self, make_dispatcher, name):
        dispatcher, runner = make_dispatcher(LinuxController)
        outcome = await dispatcher.dispatch(OpenApp(name))
        assert outcome.ok
        assert runner.calls[0].argv() == ["sh", "-c", name]

    @pytest.mark.asyncio
    async def test_launch_error_becomes_failure(self, make_dispatcher):
        dispatcher, _ = make_dispatcher(
            WindowsController,
            {"cmd": ExecutionError("cannot launch 'cmd': The system cannot find the file specified")},
        )
        outcome = await dispatcher.dispatch(OpenApp("notepad"))
        assert not outcome.ok
        assert outcome.message.startswith("❌ Error opening application: cannot launch 'cmd'")


class _ExplodingController(WindowsController):
    async def open_app(self, app_name):
        raise RuntimeError("unexpected")


@pytest.mark.asyncio
async def test_unexpected_errors_never_escape(make_dispatcher):
    dispatcher, _ = make_dispatcher(_ExplodingController)
    outcome = await dispatcher.dispatch(OpenApp("x"))
    assert not outcome.ok
    assert "unexpected" in outcome.message

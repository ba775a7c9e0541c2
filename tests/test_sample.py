import pytest

from toyrender.sample import DEFAULT_NOTIFICATION, Sample


@pytest.fixture
def sample():
    return Sample(1600, 900, "D3D12 Toy")


def test_defaults(sample):
    assert sample.width == 1600
    assert sample.height == 900
    assert sample.use_warp_device is False
    assert sample.notification == DEFAULT_NOTIFICATION


@pytest.mark.parametrize("flag", ["-warp", "/warp", "-WARP", "/Warp", "-w"])
def test_warp_flags_enable_device(sample, flag):
    sample.parse_command_line_args(["prog.exe", flag])
    assert sample.use_warp_device is True
    assert sample.title == "D3D12 Toy (WARP)"


@pytest.mark.parametrize("arg", ["-warpx", "warp", "--warp", "-fast"])
def test_other_args_ignored(sample, arg):
    sample.parse_command_line_args(["prog.exe", arg])
    assert sample.use_warp_device is False
    assert sample.title == "D3D12 Toy"


def test_program_name_is_skipped(sample):
    sample.parse_command_line_args(["-warp"])
    assert sample.use_warp_device is False
    assert sample.title == "D3D12 Toy"


def test_repeated_flag_appends_each_time(sample):
    sample.parse_command_line_args(["prog.exe", "-warp", "/warp"])
    assert sample.title.count(" (WARP)") == 2


def test_on_resize(sample):
    sample.on_resize(800, 600)
    assert (sample.width, sample.height) == (800, 600)


def test_window_text(sample):
    text = sample.window_text("FPS:60")
    assert text == f"D3D12 Toy: FPS:60 {DEFAULT_NOTIFICATION}"


def test_window_text_uses_current_title(sample):
    sample.parse_command_line_args(["prog.exe", "/warp"])
    assert sample.window_text("FPS:1").startswith(sample.title + ": FPS:1 ")
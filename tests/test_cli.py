import numpy as np

from hybridizer.cli.make_hybrid import build_parser, main
from hybridizer.repositories.image_repository import ImageRepository


def test_parser_text_with_optional_third_message():
    args = build_parser().parse_args(["--a-blur", "3", "text", "one", "two"])
    assert args.command == "text"
    assert args.msg3 is None
    assert args.a_blur == 3.0


def test_text_command_writes_hybrid(tmp_path):
    code = main(["--out-dir", str(tmp_path), "--ext", ".png", "--no-progress",
                 "text", "HI", "LO", "OK"])
    assert code == 0
    assert (tmp_path / "t.png").is_file()
    assert (tmp_path / "fft_c.png").is_file()


def test_file_command_size_mismatch_exits_1(tmp_path):
    repo = ImageRepository()
    for name, shape in (("a.png", (4, 4, 3)), ("b.png", (5, 5, 3))):
        img = repo.create_image(np.zeros(shape, dtype=np.uint8), tmp_path / name)
        repo.save(img)
    code = main(["--out-dir", str(tmp_path / "out"), "--no-progress",
                 "file", str(tmp_path / "a.png"), str(tmp_path / "b.png")])
    assert code == 1
    assert not (tmp_path / "out" / "t.jpg").exists()


def test_missing_file_exits_1(tmp_path):
    code = main(["--out-dir", str(tmp_path), "--no-progress",
                 "file", str(tmp_path / "x.png"), str(tmp_path / "y.png")])
    assert code == 1


def test_negative_blur_exits_1(tmp_path):
    code = main(["--a-blur", "-2", "--out-dir", str(tmp_path), "--no-progress",
                 "text", "a", "b"])
    assert code == 1


def test_unknown_log_level_exits_1(tmp_path):
    code = main(["--log-level", "BOGUS", "--out-dir", str(tmp_path), "--no-progress",
                 "text", "a", "b"])
    assert code == 1
    assert not (tmp_path / "t.jpg").exists()

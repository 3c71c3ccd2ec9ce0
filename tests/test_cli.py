from witchquest.cli import main


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\nNo args\n"


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().out == "Error\nOnly the first file would be used\n"


def test_wrong_extension(capsys):
    assert main(["maps/level.txt"]) == 1
    assert capsys.readouterr().out == "Error\nInvalid file extension\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out == "Error\nEmpty map file\n"


def test_small_map(tmp_path, capsys):
    path = tmp_path / "small.ber"
    path.write_text("11\n1P\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map dimension\n"


def test_invalid_character(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("11111\n1PXCE1\n11111\n")
    assert main([str(path)]) == 1
    assert "Invalid map attribute" in capsys.readouterr().out


def test_open_wall(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("11111\n0PCE1\n11111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid wall or is not rectangular\n"
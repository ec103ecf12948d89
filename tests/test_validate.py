import pytest

from fastp_runner.entities import Mode
from fastp_runner.errors import DirectoryCreateError, MissingInputFile, UsageError
from fastp_runner.validate import ensure_outdir, parse_args


class TestParseArgs:
    @pytest.mark.parametrize("n", [0, 1, 3, 5])
    def test_wrong_count_is_usage_error(self, n):
        with pytest.raises(UsageError) as exc:
            parse_args(["x"] * n)
        assert exc.value.exit_code == 1
        assert exc.value.kind == "UsageError"

    def test_paired(self, reads, tmp_path):
        r1, r2 = reads
        req = parse_args([str(r1), str(r2), str(tmp_path / "out"), "sample1"])
        assert req.mode is Mode.PAIRED_END
        assert req.r2 == str(r2)

    def test_single_end_sentinel(self, reads, tmp_path):
        r1, _ = reads
        req = parse_args([str(r1), "NA", str(tmp_path / "out"), "s2"])
        assert req.mode is Mode.SINGLE_END
        assert req.r2 is None

    @pytest.mark.parametrize("r2", ["NA", "missing_R2.fq.gz"])
    def test_missing_r1(self, tmp_path, reads, r2):
        _, existing_r2 = reads
        with pytest.raises(MissingInputFile, match="R1 file does not exist"):
            parse_args([str(tmp_path / "nope.fq.gz"), r2, "out", "b"])
        with pytest.raises(MissingInputFile, match="R1 file does not exist"):
            parse_args([str(tmp_path / "nope.fq.gz"), str(existing_r2), "out", "b"])

    def test_missing_r2(self, reads, tmp_path):
        r1, _ = reads
        with pytest.raises(MissingInputFile, match="R2 file does not exist"):
            parse_args([str(r1), str(tmp_path / "nope_R2.fq.gz"), "out", "b"])

    def test_directory_is_not_an_input_file(self, reads, tmp_path):
        _, r2 = reads
        with pytest.raises(MissingInputFile):
            parse_args([str(tmp_path), str(r2), "out", "b"])

    def test_does_not_touch_outdir(self, reads, tmp_path):
        r1, r2 = reads
        parse_args([str(r1), str(r2), str(tmp_path / "out"), "b"])
        assert not (tmp_path / "out").exists()


class TestEnsureOutdir:
    def test_existing_dir_is_left_alone(self, tmp_path, capsys):
        assert ensure_outdir(tmp_path) is False
        assert capsys.readouterr().err == ""

    def test_creates_with_parents_and_warns_once(self, tmp_path, capsys):
        target = tmp_path / "a" / "b" / "c"
        assert ensure_outdir(str(target)) is True
        assert target.is_dir()
        err = capsys.readouterr().err
        assert err.count("does not exist. Creating.") == 1

    def test_file_in_the_way(self, tmp_path, capsys):
        blocker = tmp_path / "out"
        blocker.write_text("not a directory")
        with pytest.raises(DirectoryCreateError, match="exists and is not a directory") as exc:
            ensure_outdir(blocker)
        assert exc.value.exit_code == 1
        assert "Creating" not in capsys.readouterr().err

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        with pytest.raises(DirectoryCreateError):
            ensure_outdir(blocker / "sub")

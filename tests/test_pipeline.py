import numpy as np
import pytest
from hearttree import PipelineConfig, SplitConfig, TreeParams, run_pipeline
from hearttree.cli import main
from hearttree.errors import ConversionError


def _write_heart_like(tmp_path, n=20, name="heart.csv"):
    """Two features; the label is 1 exactly when ``b >= 2``."""
    lines = ["a,b,target"]
    for i in range(n):
        b = (i * 7) % 5
        lines.append(f"{i},{b},{int(b >= 2)}")
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n")
    return path


def test_run_pipeline(tmp_path):
    path = _write_heart_like(tmp_path)
    result = run_pipeline(PipelineConfig(data_path=path, tree=TreeParams(random_state=0)))
    assert result.dataset.records.shape == (20, 2)
    assert len(result.split.train) == 16 and len(result.split.test) == 4
    assert result.actual.tolist() == [1, 1, 0, 1]
    assert result.predictions.tolist() == [1, 1, 0, 1]
    assert result.evaluation.accuracy == 1.0
    assert result.elapsed >= 0.0


def test_run_pipeline_shuffled(tmp_path):
    path = _write_heart_like(tmp_path, n=40)
    cfg = PipelineConfig(data_path=path, split=SplitConfig(ratio=0.75, shuffle=True, random_state=3))
    result = run_pipeline(cfg)
    assert len(result.split.test) == 10
    assert np.array_equal(result.actual, result.dataset.targets[result.split.test_indices])


def test_run_pipeline_propagates_errors(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("a,target\n1,0\nabc,1\n")
    with pytest.raises(ConversionError):
        run_pipeline(PipelineConfig(data_path=path))


def test_config_from_env(tmp_path):
    cfg = PipelineConfig.from_env({"HEARTTREE_DATA": str(tmp_path / "x.csv")})
    assert cfg.data_path == tmp_path / "x.csv"
    assert PipelineConfig.from_env({}).data_path.name == "heart.csv"
    explicit = PipelineConfig.from_env({"HEARTTREE_DATA": "ignored.csv"}, data_path="y.csv")
    assert explicit.data_path.name == "y.csv"
    assert cfg.to_dict()["criterion"] == "gini"


def test_cli_report(tmp_path, capsys):
    path = _write_heart_like(tmp_path)
    assert main(["--data", str(path), "--seed", "0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Predictions: [1, 1, 0, 1]"
    assert out[1] == "Actual targets: [1, 1, 0, 1]"
    assert out[2] == "Accuracy: 100.00%"
    assert out[-1].startswith("Time elapsed: ")


def test_cli_reads_path_from_env(tmp_path, capsys, monkeypatch):
    path = _write_heart_like(tmp_path, name="other.csv")
    monkeypatch.setenv("HEARTTREE_DATA", str(path))
    assert main(["--confusion", "--show-tree"]) == 0
    out = capsys.readouterr().out
    assert "Confusion matrix" in out
    assert "Predict" in out


@pytest.mark.parametrize("content, args, stage", [
    (None, [], "parse"),
    ("a,target\n", [], "shape"),
    ("a,target\n1,0\n2\n", [], "parse"),
    ("a,target\n1,-1\n", [], "shape"),
    ("a,target\n1,0\n2,1e20\n", [], "shape"),
    ("a,target\n1,0\n2,1\n", ["--ratio", "1.0"], "partition"),
])
def test_cli_failures_exit_nonzero(tmp_path, capsys, content, args, stage):
    path = tmp_path / "in.csv"
    if content is not None:
        path.write_text(content)
    assert main(["--data", str(path), *args]) == 1
    err = capsys.readouterr().err
    assert f"error [{stage}]" in err


def test_cli_bad_argument():
    with pytest.raises(SystemExit) as exc:
        main(["--max-depth", "0"])
    assert exc.value.code == 2


def test_pipeline_logs_through_loguru(tmp_path):
    from loguru import logger
    from hearttree.log import configure_logging

    messages = []
    handler = configure_logging("info", sink=messages.append)
    try:
        run_pipeline(PipelineConfig(data_path=_write_heart_like(tmp_path)))
    finally:
        logger.remove(handler)
    text = "".join(messages)
    assert "| INFO | Loading" in text
    assert "Accuracy 1.0000 (4/4)" in text

import os

from main import main


def test_main_default_network(capsys, tmp_path):
    code = main(["--output-dir", str(tmp_path), "--check"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Maximum flow: 19" in out
    assert "MISMATCH" not in out
    assert len(os.listdir(tmp_path)) == 2


def test_main_from_csv(capsys, tmp_path):
    nodes = tmp_path / "nodes.csv"
    edges = tmp_path / "edges.csv"
    nodes.write_text("id,role\ns,source\nt,sink\n")
    edges.write_text("id,from,to,capacity\ne1,s,t,3\n")
    code = main(["--nodes", str(nodes), "--edges", str(edges), "--no-save"])
    assert code == 0
    assert "Maximum flow: 3" in capsys.readouterr().out


def test_main_without_source(capsys, tmp_path):
    nodes = tmp_path / "nodes.csv"
    edges = tmp_path / "edges.csv"
    nodes.write_text("id,role\na,\nt,sink\n")
    edges.write_text("id,from,to,capacity\ne1,a,t,3\n")
    assert main(["--nodes", str(nodes), "--edges", str(edges), "--no-save"]) == 1
    assert "no source" in capsys.readouterr().out


def test_main_step_limit(capsys):
    assert main(["--max-steps", "3", "--no-save"]) == 1
    assert "not finished" in capsys.readouterr().out


def test_main_bad_input(capsys, tmp_path):
    assert main(["--nodes", str(tmp_path / "nope.csv"), "--edges", str(tmp_path / "nope.csv")]) == 1
    assert "Error" in capsys.readouterr().out


def test_main_counts_preloaded_flow(capsys, tmp_path):
    nodes = tmp_path / "nodes.csv"
    edges = tmp_path / "edges.csv"
    nodes.write_text("id,role\ns,source\nt,sink\n")
    edges.write_text("id,from,to,capacity,flow\ne1,s,t,5,2\n")
    code = main(["--nodes", str(nodes), "--edges", str(edges), "--check", "--no-save"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Maximum flow: 5" in out
    assert "pushed by the engine: 3" in out
    assert "MISMATCH" not in out

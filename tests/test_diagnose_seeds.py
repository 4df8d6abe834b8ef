import importlib.util
import json
import os

import pytest

SCRIPT = os.path.join(os.path.dirname(__file__), "..", "scripts", "diagnose_seeds.py")


@pytest.fixture(scope="module")
def diagnose():
    spec = importlib.util.spec_from_file_location("diagnose_seeds", SCRIPT)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


@pytest.mark.parametrize("algorithm", ["dfs", "kruskal"])
def test_generated_mazes_have_no_structural_issues(diagnose, algorithm):
    for seed in (1, 2, 3):
        result = diagnose.run_for_seed(seed, algorithm, 7, 9)
        assert result["ok"], result


def test_main_prints_json_and_exit_code(diagnose, capsys):
    assert diagnose.main(["--size", "4x5", "11", "12"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert [r["seed"] for r in report["results"]] == [11, 12]
    assert all(r["solvable"] for r in report["results"])

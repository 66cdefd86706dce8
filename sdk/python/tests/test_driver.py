import json
import sys

import pytest
from sdk_vectors import __main__ as cli
from sdk_vectors import config, driver
from sdk_vectors.errors import OutputError
from sdk_vectors.types import ShortVecVector

CONSTANT_FAMILIES = {
    "account_layout", "primitive_type_sizes", "hash_sizes", "signature_sizes", "pubkey_sizes",
    "native_token_constants", "nonce_constants", "alt_constants", "compute_budget_constants",
    "bpf_loader_state_sizes", "ed25519_constants", "secp256k1_constants", "epoch_schedule_constants",
    "bls_constants", "bn254_constants", "slot_history_constants", "vote_state_constants",
    "sysvar_sizes", "account_limits",
}


@pytest.fixture(scope="module")
def corpus(tmp_path_factory):
    out = tmp_path_factory.mktemp("vectors")
    paths = driver.generate_all(out)
    return out, paths


class TestCorpus:
    def test_one_file_per_family(self, corpus):
        out, paths = corpus
        assert len(driver.FAMILIES) == 75
        assert [p.name for p in paths] == [f"{name}_vectors.json" for name, _ in driver.FAMILIES]
        assert sorted(p.name for p in out.iterdir()) == sorted(p.name for p in paths)

    def test_family_names_unique(self):
        names = [name for name, _ in driver.FAMILIES]
        assert len(set(names)) == len(names)

    def test_files_are_json_arrays_with_unique_names(self, corpus):
        _, paths = corpus
        for path in paths:
            records = json.loads(path.read_text(encoding="utf-8"))
            assert isinstance(records, list) and records, path.name
            names = [r["name"] for r in records if "name" in r]
            assert len(set(names)) == len(names), path.name

    def test_constants_are_single_records(self, corpus):
        out, _ = corpus
        for family in CONSTANT_FAMILIES:
            assert len(json.loads((out / f"{family}_vectors.json").read_text())) == 1, family

    def test_layout(self, corpus):
        out, _ = corpus
        text = (out / "short_vec_vectors.json").read_text()
        assert not text.endswith("\n")
        assert text.startswith('[\n  {\n    "name": "zero",')

    def test_bytes_render_as_integer_arrays(self, corpus):
        out, _ = corpus
        records = json.loads((out / "short_vec_vectors.json").read_text())
        assert records[3] == {"name": "min_2byte", "value": 128, "encoded": [128, 1]}

    def test_null_fields(self, corpus):
        out, _ = corpus
        records = {r["name"]: r for r in json.loads((out / "lamports_vectors.json").read_text())}
        assert records["negative"]["lamports"] is None

    def test_deterministic(self, corpus, tmp_path):
        out, paths = corpus
        driver.generate_all(tmp_path)
        for path in paths:
            assert (tmp_path / path.name).read_bytes() == path.read_bytes(), path.name

    def test_no_temporary_files_left(self, corpus):
        out, _ = corpus
        assert not [p for p in out.iterdir() if p.name.endswith(".tmp")]


class TestWriteFamily:
    def test_replaces_existing_file(self, tmp_path):
        target = tmp_path / "short_vec_vectors.json"
        target.write_text("stale")
        driver.write_family(tmp_path, "short_vec", [ShortVecVector("one", 1, b"\x01")])
        assert json.loads(target.read_text()) == [{"name": "one", "value": 1, "encoded": [1]}]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(OutputError) as excinfo:
            driver.write_family(tmp_path / "absent", "short_vec", [])
        assert excinfo.value.family == "short_vec"

    def test_output_path_is_a_file(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        with pytest.raises(OutputError):
            driver.generate_all(blocker)

    def test_unknown_family(self):
        with pytest.raises(KeyError):
            driver.generate_family("nope")


class TestCli:
    def test_success(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["sdk_vectors", str(tmp_path)])
        cli.main()
        assert capsys.readouterr().out.strip() == f"Generated all test vectors in {tmp_path}"
        assert (tmp_path / "account_limits_vectors.json").exists()

    def test_default_directory(self, tmp_path, monkeypatch, capsys):
        target = tmp_path / "default"
        monkeypatch.setattr(config, "OUTPUT_DIR", str(target))
        monkeypatch.setattr(sys, "argv", ["sdk_vectors"])
        cli.main()
        assert (target / "pubkey_vectors.json").exists()
        assert str(target) in capsys.readouterr().out

    def test_too_many_arguments(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["sdk_vectors", "a", "b"])
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 1
        assert "Usage" in capsys.readouterr().err

    def test_failure_reports_location(self, tmp_path, monkeypatch, capsys):
        blocker = tmp_path / "file"
        blocker.write_text("")
        monkeypatch.setattr(sys, "argv", ["sdk_vectors", str(blocker)])
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 1
        assert capsys.readouterr().err.startswith("error: <unknown>: cannot create")

"""Tests for the nova-decider-verify command."""

import dataclasses
import json

import pytest

from nova_decider.protocol.proof import save_proof_to_json
from nova_decider.verify import EXIT_ACCEPT, EXIT_BAD_INPUT, EXIT_REJECT, main


@pytest.fixture
def vk_path(decider_vk, tmp_path):
    path = tmp_path / "vk.json"
    decider_vk.to_json(path)
    return path


def _write_proof(proof, tmp_path, name="proof.json"):
    path = tmp_path / name
    save_proof_to_json(proof, path)
    return path


class TestVerifyCli:
    """Test exit status and diagnostics of the CLI."""

    def test_accept(self, vk_path, valid_proof, tmp_path, capsys) -> None:
        """An honest proof exits 0."""
        proof_path = _write_proof(valid_proof, tmp_path)
        assert main(["--vk", str(vk_path), "--proof", str(proof_path)]) == EXIT_ACCEPT
        assert "Proof verified" in capsys.readouterr().out

    def test_accept_opaque(self, vk_path, valid_proof, tmp_path) -> None:
        """--opaque goes through the flat entry point."""
        proof_path = _write_proof(valid_proof, tmp_path)
        assert main(["--vk", str(vk_path), "--proof", str(proof_path), "--opaque"]) == EXIT_ACCEPT

    def test_reject_prints_reason(self, vk_path, valid_proof, tmp_path, capsys) -> None:
        """A tampered evaluation exits 1 with the KZG reason on stderr."""
        tampered = dataclasses.replace(valid_proof, eval_e=valid_proof.eval_e + 1)
        proof_path = _write_proof(tampered, tmp_path)
        assert main(["--vk", str(vk_path), "--proof", str(proof_path)]) == EXIT_REJECT
        assert "ERROR: KZG: verifying proof for challenge E failed" in capsys.readouterr().err

    def test_reject_step_count(self, vk_path, one_step_proof, tmp_path, capsys) -> None:
        """steps == 1 exits 1."""
        proof_path = _write_proof(one_step_proof, tmp_path)
        assert main(["--vk", str(vk_path), "--proof", str(proof_path)]) == EXIT_REJECT
        assert "at least 2" in capsys.readouterr().err

    def test_reject_malformed_point(self, vk_path, valid_proof, tmp_path, capsys) -> None:
        """A point off the curve is a rejection."""
        data = valid_proof.to_dict()
        data["kzg_proofs"][0] = ["1", "3"]
        proof_path = tmp_path / "proof.json"
        proof_path.write_text(json.dumps(data))
        assert main(["--vk", str(vk_path), "--proof", str(proof_path)]) == EXIT_REJECT
        assert "Malformed point" in capsys.readouterr().err

    def test_missing_file(self, vk_path, tmp_path) -> None:
        """A missing proof file exits 2."""
        missing = tmp_path / "nope.json"
        assert main(["--vk", str(vk_path), "--proof", str(missing)]) == EXIT_BAD_INPUT

    def test_bad_json(self, vk_path, tmp_path) -> None:
        """Unparseable or incomplete JSON exits 2."""
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        assert main(["--vk", str(vk_path), "--proof", str(bad)]) == EXIT_BAD_INPUT
        bad.write_text(json.dumps({"steps": "2"}))
        assert main(["--vk", str(vk_path), "--proof", str(bad)]) == EXIT_BAD_INPUT

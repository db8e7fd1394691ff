"""Decider proof bundle and its serializations.

A DeciderProof carries every value the folding pipeline hands to the decider
verifier. It converts between three shapes:
  - grouped(): the seven grouped arguments of NovaDecider.verify_nova_proof
  - to_words()/from_words(): the flat proof[26 + 2z] array
  - to_dict()/from_dict(): JSON with decimal-string integers

Points are NOT validated here. A malformed point must surface as a hard
failure from the verifier, not as a load-time error.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence, Union

from nova_decider.primitives.curve import G1Point, G2Point, g2_from_words, g2_to_words
from nova_decider.protocol.calldata import (
    pack_opaque_proof,
    pack_opaque_proof_with_inputs,
    split_opaque_proof,
    split_opaque_proof_with_inputs,
)
from nova_decider.protocol.verifying_key import (
    g1_from_json,
    g1_to_json,
    g2_from_json,
    g2_to_json,
    parse_word,
)


@dataclass(frozen=True)
class CommitmentPair:
    """Folded witness commitment cmW and error-term commitment cmE."""

    cm_w: G1Point
    cm_e: G1Point

    def to_words(self) -> list[int]:
        return [*self.cm_w, *self.cm_e]

    @classmethod
    def from_words(cls, words: Sequence[int]) -> 'CommitmentPair':
        if len(words) != 4:
            raise ValueError(f"CommitmentPair takes 4 words, got {len(words)}")
        return cls(cm_w=(int(words[0]), int(words[1])), cm_e=(int(words[2]), int(words[3])))


@dataclass(frozen=True)
class Groth16Proof:
    """Groth16 proof (A, B, C)."""

    a: G1Point
    b: G2Point
    c: G1Point

    def to_words(self) -> list[int]:
        """[A.x, A.y, B.x_c1, B.x_c0, B.y_c1, B.y_c0, C.x, C.y]"""
        return [*self.a, *g2_to_words(self.b), *self.c]

    @classmethod
    def from_words(cls, words: Sequence[int]) -> 'Groth16Proof':
        if len(words) != 8:
            raise ValueError(f"Groth16 proof takes 8 words, got {len(words)}")
        return cls(
            a=(int(words[0]), int(words[1])),
            b=g2_from_words(words[2:6]),
            c=(int(words[6]), int(words[7])),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"pi_a": g1_to_json(self.a), "pi_b": g2_to_json(self.b), "pi_c": g1_to_json(self.c)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Groth16Proof':
        return cls(
            a=g1_from_json(data["pi_a"]),
            b=g2_from_json(data["pi_b"]),
            c=g1_from_json(data["pi_c"]),
        )


@dataclass(frozen=True)
class DeciderProof:
    """Everything the decider verifier checks in one call.

    Attributes:
        steps: Number of folded IVC steps i
        initial_state: z_0
        final_state: z_i
        folded: Accumulated running instance commitments U_i.{cmW, cmE}
        fresh_cm_w: Incoming instance witness commitment u_i.cmW
        cm_t: Cross-term commitment
        r: Folding randomness
        groth16: Groth16 proof of the decider circuit
        challenge_w, challenge_e: KZG evaluation points
        eval_w, eval_e: Claimed evaluations
        kzg_proof_w, kzg_proof_e: KZG opening proofs
    """

    steps: int
    initial_state: tuple[int, ...]
    final_state: tuple[int, ...]
    folded: CommitmentPair
    fresh_cm_w: G1Point
    cm_t: G1Point
    r: int
    groth16: Groth16Proof
    challenge_w: int
    challenge_e: int
    eval_w: int
    eval_e: int
    kzg_proof_w: G1Point
    kzg_proof_e: G1Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial_state", tuple(self.initial_state))
        object.__setattr__(self, "final_state", tuple(self.final_state))
        if len(self.initial_state) != len(self.final_state):
            raise ValueError("initial_state and final_state must have the same length")

    @property
    def state_len(self) -> int:
        return len(self.initial_state)

    # --- Grouped arguments ---

    def grouped(self) -> tuple:
        """Arguments for NovaDecider.verify_nova_proof, in order."""
        return (
            [self.steps, *self.initial_state, *self.final_state],
            self.folded.to_words(),
            list(self.fresh_cm_w),
            [*self.cm_t, self.r],
            self.groth16.to_words(),
            [self.challenge_w, self.challenge_e, self.eval_w, self.eval_e],
            [list(self.kzg_proof_w), list(self.kzg_proof_e)],
        )

    @classmethod
    def from_grouped(
        cls,
        steps_and_states: Sequence[int],
        folded_commitments: Sequence[int],
        fresh_cm_w: Sequence[int],
        cm_t_and_r: Sequence[int],
        groth16_proof: Sequence[int],
        challenges_and_evals: Sequence[int],
        kzg_proofs: Sequence[Sequence[int]],
    ) -> 'DeciderProof':
        n = len(steps_and_states)
        if n < 3 or n % 2 == 0:
            raise ValueError(f"steps_and_states must have length 1 + 2z, got {n}")
        if len(fresh_cm_w) != 2 or len(cm_t_and_r) != 3 or len(challenges_and_evals) != 4:
            raise ValueError("Grouped argument has the wrong length")
        if len(kzg_proofs) != 2 or any(len(p) != 2 for p in kzg_proofs):
            raise ValueError("kzg_proofs must be [[x, y], [x, y]]")
        z = (n - 1) // 2
        cw, ce, ew, ee = (int(v) for v in challenges_and_evals)
        return cls(
            steps=int(steps_and_states[0]),
            initial_state=tuple(int(v) for v in steps_and_states[1 : 1 + z]),
            final_state=tuple(int(v) for v in steps_and_states[1 + z :]),
            folded=CommitmentPair.from_words(folded_commitments),
            fresh_cm_w=(int(fresh_cm_w[0]), int(fresh_cm_w[1])),
            cm_t=(int(cm_t_and_r[0]), int(cm_t_and_r[1])),
            r=int(cm_t_and_r[2]),
            groth16=Groth16Proof.from_words(groth16_proof),
            challenge_w=cw,
            challenge_e=ce,
            eval_w=ew,
            eval_e=ee,
            kzg_proof_w=(int(kzg_proofs[0][0]), int(kzg_proofs[0][1])),
            kzg_proof_e=(int(kzg_proofs[1][0]), int(kzg_proofs[1][1])),
        )

    # --- Flat words ---

    def to_opaque(self) -> list[int]:
        """proof[25], the array passed next to (steps, z_0, z_i)."""
        return pack_opaque_proof(*self.grouped()[1:])

    def to_words(self) -> list[int]:
        """The flat proof[26 + 2z] array."""
        return pack_opaque_proof_with_inputs(
            self.steps, self.initial_state, self.final_state, self.to_opaque()
        )

    @classmethod
    def from_words(cls, words: Sequence[int], state_len: int) -> 'DeciderProof':
        steps, z_0, z_i, proof = split_opaque_proof_with_inputs(words, state_len)
        return cls.from_grouped([steps, *z_0, *z_i], *split_opaque_proof(proof))

    # --- JSON ---

    def to_dict(self) -> dict[str, Any]:
        return {
            "steps": str(self.steps),
            "z_0": [str(v) for v in self.initial_state],
            "z_i": [str(v) for v in self.final_state],
            "U_i": {"cmW": g1_to_json(self.folded.cm_w), "cmE": g1_to_json(self.folded.cm_e)},
            "u_i_cmW": g1_to_json(self.fresh_cm_w),
            "cmT": g1_to_json(self.cm_t),
            "r": str(self.r),
            "groth16": self.groth16.to_dict(),
            "challenges": [str(self.challenge_w), str(self.challenge_e)],
            "evals": [str(self.eval_w), str(self.eval_e)],
            "kzg_proofs": [g1_to_json(self.kzg_proof_w), g1_to_json(self.kzg_proof_e)],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'DeciderProof':
        challenges = [parse_word(v) for v in data["challenges"]]
        evals = [parse_word(v) for v in data["evals"]]
        kzg_proofs = data["kzg_proofs"]
        if len(challenges) != 2 or len(evals) != 2 or len(kzg_proofs) != 2:
            raise ValueError("challenges, evals and kzg_proofs each take two entries")
        return cls(
            steps=parse_word(data["steps"]),
            initial_state=tuple(parse_word(v) for v in data["z_0"]),
            final_state=tuple(parse_word(v) for v in data["z_i"]),
            folded=CommitmentPair(
                cm_w=g1_from_json(data["U_i"]["cmW"]),
                cm_e=g1_from_json(data["U_i"]["cmE"]),
            ),
            fresh_cm_w=g1_from_json(data["u_i_cmW"]),
            cm_t=g1_from_json(data["cmT"]),
            r=parse_word(data["r"]),
            groth16=Groth16Proof.from_dict(data["groth16"]),
            challenge_w=challenges[0],
            challenge_e=challenges[1],
            eval_w=evals[0],
            eval_e=evals[1],
            kzg_proof_w=g1_from_json(kzg_proofs[0]),
            kzg_proof_e=g1_from_json(kzg_proofs[1]),
        )


def load_proof_from_json(path: Union[str, Path]) -> DeciderProof:
    """Load a decider proof bundle from a JSON file."""
    with open(path, 'r') as f:
        data = json.load(f)
    return DeciderProof.from_dict(data)


def save_proof_to_json(proof: DeciderProof, path: Union[str, Path]) -> None:
    with open(path, 'w') as f:
        json.dump(proof.to_dict(), f, indent=2)

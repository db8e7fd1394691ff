"""Nova + CycleFold decider verifier.

Verifies the final proof of a folded IVC chain in three stages:
  1. Recompute the folded commitments
         cmW = U.cmW + r * u.cmW
         cmE = U.cmE + r * cmT
  2. Check the KZG openings of cmW and cmE at their challenges
  3. Check the Groth16 proof of the decider circuit against the public-input
     vector built from (pp_hash, i, z_0, z_i, limbs of cmW/cmE, challenges,
     evaluations, limbs of cmT)

Checks run in a fixed order and the first failure aborts the call:
step count -> KZG(W) -> KZG(E) -> Groth16.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np

from nova_decider.primitives import curve
from nova_decider.primitives.curve import G1Point
from nova_decider.primitives.limbs import N_LIMBS, decompose
from nova_decider.protocol.calldata import split_opaque_proof, split_opaque_proof_with_inputs
from nova_decider.protocol.errors import Groth16VerificationError, KzgOpeningError, StepCountError
from nova_decider.protocol.groth16 import Groth16Verifier
from nova_decider.protocol.kzg import KZG10Verifier
from nova_decider.protocol.proof import DeciderProof
from nova_decider.protocol.verifying_key import DeciderVerifyingKey

MIN_STEPS = 2


# --- Public Inputs ---


@dataclass(frozen=True)
class PublicInputLayout:
    """Offsets of each field in the Groth16 public-input vector.

    Attributes:
        state_len: IVC state arity z
    """

    state_len: int

    @property
    def pp_hash(self) -> int:
        return 0

    @property
    def steps(self) -> int:
        return 1

    @property
    def initial_state(self) -> int:
        return 2

    @property
    def final_state(self) -> int:
        return 2 + self.state_len

    @property
    def cm_w(self) -> int:
        return 2 + 2 * self.state_len

    @property
    def cm_e(self) -> int:
        return self.cm_w + 2 * N_LIMBS

    @property
    def challenges_and_evals(self) -> int:
        return self.cm_e + 2 * N_LIMBS

    @property
    def cm_t(self) -> int:
        return self.challenges_and_evals + 4

    @property
    def n_public_inputs(self) -> int:
        return self.cm_t + 2 * N_LIMBS


def _point_limbs(P: G1Point) -> list[int]:
    return decompose(P[0]) + decompose(P[1])


def assemble_public_inputs(
    layout: PublicInputLayout,
    pp_hash: int,
    steps: int,
    initial_state: Sequence[int],
    final_state: Sequence[int],
    cm_w: G1Point,
    cm_e: G1Point,
    challenges_and_evals: Sequence[int],
    cm_t: G1Point,
) -> list[int]:
    """Build the Groth16 public-input vector. Values are placed, never reduced."""
    z = layout.state_len
    if len(initial_state) != z or len(final_state) != z:
        raise ValueError(f"State vectors must have length {z}")
    if len(challenges_and_evals) != 4:
        raise ValueError("challenges_and_evals takes 4 words")

    inputs = np.zeros(layout.n_public_inputs, dtype=object)
    inputs[layout.pp_hash] = pp_hash
    inputs[layout.steps] = steps
    inputs[layout.initial_state : layout.initial_state + z] = list(initial_state)
    inputs[layout.final_state : layout.final_state + z] = list(final_state)
    inputs[layout.cm_w : layout.cm_w + 2 * N_LIMBS] = _point_limbs(cm_w)
    inputs[layout.cm_e : layout.cm_e + 2 * N_LIMBS] = _point_limbs(cm_e)
    inputs[layout.challenges_and_evals : layout.challenges_and_evals + 4] = list(challenges_and_evals)
    inputs[layout.cm_t : layout.cm_t + 2 * N_LIMBS] = _point_limbs(cm_t)
    return [int(v) for v in inputs]


# --- Decider ---


class NovaDecider:
    """Decider verifier for one (circuit, parameter set).

    Holds a KZG verifier and a Groth16 verifier and combines their results.
    Both are built from the verifying key unless supplied explicitly.
    """

    def __init__(
        self,
        vk: DeciderVerifyingKey,
        kzg: Optional[KZG10Verifier] = None,
        groth16: Optional[Groth16Verifier] = None,
    ):
        self.vk = vk
        self.layout = PublicInputLayout(vk.state_len)
        self.kzg = kzg if kzg is not None else KZG10Verifier(vk.kzg)
        self.groth16 = groth16 if groth16 is not None else Groth16Verifier(vk.groth16)
        if self.groth16.n_public_inputs != self.layout.n_public_inputs:
            raise ValueError(
                f"Groth16 verifier takes {self.groth16.n_public_inputs} inputs, "
                f"layout needs {self.layout.n_public_inputs}"
            )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'NovaDecider':
        return cls(DeciderVerifyingKey.from_json(path))

    @property
    def state_len(self) -> int:
        return self.vk.state_len

    def verify_nova_proof(
        self,
        steps_and_states: Sequence[int],
        folded_commitments: Sequence[int],
        fresh_cm_w: Sequence[int],
        cm_t_and_r: Sequence[int],
        groth16_proof: Sequence[int],
        challenges_and_evals: Sequence[int],
        kzg_proofs: Sequence[Sequence[int]],
    ) -> bool:
        """Verify a decider proof given as grouped word arrays.

        Args:
            steps_and_states: [i, z_0[z], z_i[z]]
            folded_commitments: [U.cmW.x, U.cmW.y, U.cmE.x, U.cmE.y]
            fresh_cm_w: [u.cmW.x, u.cmW.y]
            cm_t_and_r: [cmT.x, cmT.y, r]
            groth16_proof: [A.x, A.y, B (4 words, EVM order), C.x, C.y]
            challenges_and_evals: [challenge_W, challenge_E, eval_W, eval_E]
            kzg_proofs: [[pi_W.x, pi_W.y], [pi_E.x, pi_E.y]]

        Returns:
            True when every check passes.

        Raises:
            StepCountError: i < 2
            KzgOpeningError: the opening of cmW or cmE failed
            Groth16VerificationError: the Groth16 proof was rejected
            MalformedPointError: a supplied point is not a valid group element
            ValueError: a grouped argument has the wrong length
        """
        proof = DeciderProof.from_grouped(
            steps_and_states,
            folded_commitments,
            fresh_cm_w,
            cm_t_and_r,
            groth16_proof,
            challenges_and_evals,
            kzg_proofs,
        )
        return self.verify(proof)

    def verify(self, proof: DeciderProof) -> bool:
        """Verify a typed decider proof. See verify_nova_proof."""
        if proof.state_len != self.state_len:
            raise ValueError(
                f"Proof has state length {proof.state_len}, key expects {self.state_len}"
            )
        if proof.steps < MIN_STEPS:
            raise StepCountError()

        # Fold the commitments with the same rule the prover used
        cm_w = curve.add(proof.folded.cm_w, curve.mul_scalar(proof.fresh_cm_w, proof.r))
        cm_e = curve.add(proof.folded.cm_e, curve.mul_scalar(proof.cm_t, proof.r))

        public_inputs = assemble_public_inputs(
            self.layout,
            self.vk.pp_hash,
            proof.steps,
            proof.initial_state,
            proof.final_state,
            cm_w,
            cm_e,
            [proof.challenge_w, proof.challenge_e, proof.eval_w, proof.eval_e],
            proof.cm_t,
        )

        if not self.kzg.check(cm_w, proof.kzg_proof_w, proof.challenge_w, proof.eval_w):
            raise KzgOpeningError("W")
        if not self.kzg.check(cm_e, proof.kzg_proof_e, proof.challenge_e, proof.eval_e):
            raise KzgOpeningError("E")

        g16 = proof.groth16
        if not self.groth16.verify_proof(g16.a, g16.b, g16.c, public_inputs):
            raise Groth16VerificationError()
        return True

    # --- Opaque entry points ---

    def verify_opaque_nova_proof_with_inputs(
        self,
        steps: int,
        initial_state: Sequence[int],
        final_state: Sequence[int],
        proof: Sequence[int],
    ) -> bool:
        """Verify (i, z_0, z_i, proof[25])."""
        if len(initial_state) != self.state_len or len(final_state) != self.state_len:
            raise ValueError(f"State vectors must have length {self.state_len}")
        steps_and_states = [steps, *initial_state, *final_state]
        return self.verify_nova_proof(steps_and_states, *split_opaque_proof(proof))

    def verify_opaque_nova_proof(self, proof: Sequence[int]) -> bool:
        """Verify the flat proof[26 + 2z] array."""
        steps, z_0, z_i, rest = split_opaque_proof_with_inputs(proof, self.state_len)
        return self.verify_opaque_nova_proof_with_inputs(steps, z_0, z_i, rest)

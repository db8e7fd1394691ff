"""Decider verifying key: Groth16 constants, KZG generators and circuit parameters.

A verifying key is produced once per (circuit, curve, parameter set) and is
never patched afterwards. All points are checked when the key is constructed,
so a verifier built from a key never sees a malformed constant.

JSON layout (integers as decimal strings, "0x" hex also accepted):
{
  "pp_hash": "...",
  "state_len": 1,
  "groth16": {
    "vk_alpha_1": [x, y],
    "vk_beta_2":  [[x_c0, x_c1], [y_c0, y_c1]],
    "vk_gamma_2": ...,
    "vk_delta_2": ...,
    "IC": [[x, y], ...]
  },
  "kzg": {"g1": [x, y], "g2": [[..], [..]], "vk": [[..], [..]]}
}
snarkjs-style projective triples ([x, y, "1"], [[..], [..], ["1", "0"]]) are
accepted on input as long as the trailing coordinate is one.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence, Union

from nova_decider.primitives.curve import G1Point, G2Point, validate_g1, validate_g2
from nova_decider.primitives.field import in_scalar_field
from nova_decider.primitives.limbs import N_LIMBS

# --- JSON Helpers ---

Word = Union[int, str]


def parse_word(v: Word) -> int:
    """Parse a JSON word: int, decimal string or 0x-prefixed hex string."""
    if isinstance(v, bool):
        raise TypeError("Boolean is not a valid word")
    if isinstance(v, int):
        n = v
    elif isinstance(v, str):
        s = v.strip()
        n = int(s, 16) if s.lower().startswith("0x") else int(s, 10)
    else:
        raise TypeError(f"Expected int or string word, got {type(v).__name__}")
    if not 0 <= n < 1 << 256:
        raise ValueError(f"Word out of 256-bit range: {v}")
    return n


def g1_from_json(v: Sequence[Word]) -> G1Point:
    if len(v) == 3:
        if parse_word(v[2]) != 1:
            raise ValueError("Projective G1 point must have z = 1")
        v = v[:2]
    if len(v) != 2:
        raise ValueError(f"G1 point takes 2 coordinates, got {len(v)}")
    return (parse_word(v[0]), parse_word(v[1]))


def g2_from_json(v: Sequence[Sequence[Word]]) -> G2Point:
    if len(v) == 3:
        if [parse_word(c) for c in v[2]] != [1, 0]:
            raise ValueError("Projective G2 point must have z = 1")
        v = v[:2]
    if len(v) != 2 or any(len(c) != 2 for c in v):
        raise ValueError("G2 point takes [[x_c0, x_c1], [y_c0, y_c1]]")
    (x0, x1), (y0, y1) = v
    return ((parse_word(x0), parse_word(x1)), (parse_word(y0), parse_word(y1)))


def g1_to_json(P: G1Point) -> list[str]:
    return [str(c) for c in P]


def g2_to_json(Q: G2Point) -> list[list[str]]:
    return [[str(c) for c in coord] for coord in Q]


def public_input_count(state_len: int) -> int:
    """Length N of the Groth16 public-input vector for a given state arity."""
    return 2 + 2 * state_len + 4 * N_LIMBS + 4 + 2 * N_LIMBS


# --- Verifying Keys ---


@dataclass(frozen=True)
class Groth16VerifyingKey:
    """Groth16 verification constants.

    Attributes:
        alpha1: [alpha]_1
        beta2: [beta]_2
        gamma2: [gamma]_2
        delta2: [delta]_2
        ic: IC[0..N], one G1 point per public input plus the constant term
    """

    alpha1: G1Point
    beta2: G2Point
    gamma2: G2Point
    delta2: G2Point
    ic: tuple[G1Point, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "ic", tuple(self.ic))
        if not self.ic:
            raise ValueError("Groth16 key needs at least IC[0]")
        validate_g1(self.alpha1)
        for Q in (self.beta2, self.gamma2, self.delta2):
            validate_g2(Q)
        for P in self.ic:
            validate_g1(P)

    @property
    def n_public_inputs(self) -> int:
        return len(self.ic) - 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Groth16VerifyingKey':
        return cls(
            alpha1=g1_from_json(data["vk_alpha_1"]),
            beta2=g2_from_json(data["vk_beta_2"]),
            gamma2=g2_from_json(data["vk_gamma_2"]),
            delta2=g2_from_json(data["vk_delta_2"]),
            ic=tuple(g1_from_json(p) for p in data["IC"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "protocol": "groth16",
            "curve": "bn128",
            "nPublic": self.n_public_inputs,
            "vk_alpha_1": g1_to_json(self.alpha1),
            "vk_beta_2": g2_to_json(self.beta2),
            "vk_gamma_2": g2_to_json(self.gamma2),
            "vk_delta_2": g2_to_json(self.delta2),
            "IC": [g1_to_json(p) for p in self.ic],
        }


@dataclass(frozen=True)
class KzgVerifyingKey:
    """KZG10 generators: g1 = [1]_1, g2 = [1]_2, vk = [tau]_2."""

    g1: G1Point
    g2: G2Point
    vk: G2Point

    def __post_init__(self) -> None:
        validate_g1(self.g1)
        validate_g2(self.g2)
        validate_g2(self.vk)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'KzgVerifyingKey':
        return cls(
            g1=g1_from_json(data["g1"]),
            g2=g2_from_json(data["g2"]),
            vk=g2_from_json(data["vk"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "g1": g1_to_json(self.g1),
            "g2": g2_to_json(self.g2),
            "vk": g2_to_json(self.vk),
        }


@dataclass(frozen=True)
class DeciderVerifyingKey:
    """Everything a decider verifier instance is generated from.

    Attributes:
        pp_hash: Domain-separation constant placed at public input 0
        state_len: IVC state arity (length of z_0 and z_i)
        groth16: Groth16 constants; IC length must be N + 1
        kzg: KZG generators shared by both openings
    """

    pp_hash: int
    state_len: int
    groth16: Groth16VerifyingKey
    kzg: KzgVerifyingKey

    def __post_init__(self) -> None:
        if self.state_len < 1:
            raise ValueError(f"state_len must be positive, got {self.state_len}")
        if not in_scalar_field(self.pp_hash):
            raise ValueError("pp_hash must be a scalar-field element")
        expected = public_input_count(self.state_len)
        if self.groth16.n_public_inputs != expected:
            raise ValueError(
                f"Groth16 key has {self.groth16.n_public_inputs} public inputs, "
                f"expected {expected} for state_len={self.state_len}"
            )

    @property
    def n_public_inputs(self) -> int:
        return self.groth16.n_public_inputs

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'DeciderVerifyingKey':
        return cls(
            pp_hash=parse_word(data["pp_hash"]),
            state_len=int(data.get("state_len", 1)),
            groth16=Groth16VerifyingKey.from_dict(data["groth16"]),
            kzg=KzgVerifyingKey.from_dict(data["kzg"]),
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'DeciderVerifyingKey':
        """Load and validate a verifying key from a JSON file."""
        with open(path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pp_hash": str(self.pp_hash),
            "state_len": self.state_len,
            "groth16": self.groth16.to_dict(),
            "kzg": self.kzg.to_dict(),
        }

    def to_json(self, path: Union[str, Path]) -> None:
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

"""
Pytest configuration for decider verifier tests.

Builds one toy verifying key and a handful of honest proofs per session:
a full decider verification costs a few seconds in pure Python, so proofs
are shared and mutated copies are derived with dataclasses.replace.
"""

import random
import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
repo_dir = Path(__file__).parent.parent
if str(repo_dir) not in sys.path:
    sys.path.insert(0, str(repo_dir))

from nova_decider.protocol.decider import NovaDecider  # noqa: E402
from nova_decider.protocol.verifying_key import public_input_count  # noqa: E402

from toy_setup import Trapdoor, make_verifying_key, prove  # noqa: E402

STATE_LEN = 1
PP_HASH = 0x1A2B3C4D5E6F708192A3B4C5D6E7F8091A2B3C4D5E6F708192A3B4C5D6E7F80
INITIAL_STATE = (1,)
FINAL_STATE = (14,)


@pytest.fixture(scope="session")
def trapdoor():
    return Trapdoor.sample(random.Random(0xDEC1DE), public_input_count(STATE_LEN))


@pytest.fixture(scope="session")
def decider_vk(trapdoor):
    return make_verifying_key(trapdoor, state_len=STATE_LEN, pp_hash=PP_HASH)


@pytest.fixture(scope="session")
def decider(decider_vk):
    return NovaDecider(decider_vk)


@pytest.fixture(scope="session")
def valid_proof(trapdoor, decider_vk):
    """Honest proof for 5 folded steps."""
    return prove(trapdoor, decider_vk, 5, INITIAL_STATE, FINAL_STATE, random.Random(1))


@pytest.fixture(scope="session")
def two_step_proof(trapdoor, decider_vk):
    return prove(trapdoor, decider_vk, 2, INITIAL_STATE, (3,), random.Random(2))


@pytest.fixture(scope="session")
def one_step_proof(trapdoor, decider_vk):
    """Cryptographically consistent proof claiming a single step."""
    return prove(trapdoor, decider_vk, 1, INITIAL_STATE, (2,), random.Random(3))

from pseudo_random.application.services.generator import Generator, new, rand
from pseudo_random.application.services.seed_policy import derive_rng, derive_seed, to_seed_int
from pseudo_random.domain.errors import (
    MapKeyCollisionError,
    PseudoRandomError,
    SeedComputationError,
    StructuralLimitError,
)
from pseudo_random.domain.symbol import Symbol

__version__ = "1.0.0"

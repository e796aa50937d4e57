"""Uniform piece randomizer"""
import random
from typing import Optional

import pygame

from linetris_piece import KINDS


class KindRandom:
    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = pygame.time.get_ticks() ^ random.getrandbits(32)
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)

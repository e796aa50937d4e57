"""Keyboard decoding: pygame events to one Command per poll"""
from collections import deque
from typing import Deque, Optional

import pygame

from linetris_piece import Command

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_UP: Command.ROTATE,
    # home-row layout
    pygame.K_j: Command.MOVE_LEFT,
    pygame.K_l: Command.MOVE_RIGHT,
    pygame.K_k: Command.MOVE_DOWN,
    pygame.K_i: Command.ROTATE,
    pygame.K_q: Command.QUIT,
    pygame.K_ESCAPE: Command.QUIT,
}


def decode(e) -> Optional[Command]:
    if e.type == pygame.QUIT:
        return Command.QUIT
    if e.type == pygame.KEYDOWN:
        return KEYMAP.get(e.key)
    return None


class KeyDecoder:
    def __init__(self):
        self.pending: Deque[Command] = deque()

    def feed(self, events):
        for e in events:
            c = decode(e)
            if c is not None:
                self.pending.append(c)

    def next(self) -> Command:
        return self.pending.popleft() if self.pending else Command.NONE

    def poll(self) -> Command:
        self.feed(pygame.event.get())
        return self.next()

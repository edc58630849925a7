"""
Core document model for ScreenFlow.

This module contains the flow document entities, the mutation engine and
the selection state machine.
"""

from . import engine
from .element import Element, Position
from .flow import FlowDocument, find_element, find_screen, locate_element
from .ids import IdGenerator, RandomIdGenerator, SequentialIdGenerator
from .result import MutationResult
from .screen import Screen
from .selection import Selection, current_element, current_screen, initial_selection

__all__ = [
    "Element",
    "Position",
    "Screen",
    "FlowDocument",
    "find_screen",
    "find_element",
    "locate_element",
    "IdGenerator",
    "RandomIdGenerator",
    "SequentialIdGenerator",
    "MutationResult",
    "Selection",
    "initial_selection",
    "current_screen",
    "current_element",
    "engine",
]

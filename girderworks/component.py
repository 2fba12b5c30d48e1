"""Behaviour components that attach to modular objects."""

from abc import ABC, abstractmethod


class Component(ABC):
    """A named, switchable piece of behaviour run once per frame."""

    def __init__(self, name):
        self.name = name
        self.owner = None
        self.enabled = True

    def attach_owner(self, owner):
        self.owner = owner

    @abstractmethod
    def perform(self):
        """Run one frame of this behaviour."""


class PoolableComponent(Component):
    """Marks an object as taking part in a pool."""

    def __init__(self):
        super().__init__("GD_PoolableObject")
        self.active = False

    def perform(self):
        """Report whether the pooled object is currently in use."""
        return self.active
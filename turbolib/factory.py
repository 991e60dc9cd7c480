"""Factory method pattern: creators decide which kind of account to make."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Account(ABC):
    """An account that can name its type."""

    @abstractmethod
    def get_type(self) -> str:
        """Return the account type name."""


class AccountBusiness(Account):
    def get_type(self) -> str:
        return "Business"


class AccountPersonal(Account):
    def get_type(self) -> str:
        return "Personal"


class AccountFactory(ABC):
    """A creator whose subclasses choose the account to create."""

    @abstractmethod
    def create_account(self) -> Account:
        """The factory method."""

    def get_account_type(self) -> str:
        """Create an account and return its type name."""
        return self.create_account().get_type()


class AccountBusinessCreator(AccountFactory):
    def create_account(self) -> Account:
        return AccountBusiness()


class AccountPersonalCreator(AccountFactory):
    def create_account(self) -> Account:
        return AccountPersonal()
"""
Domain exceptions for the ledger.

Callers need to tell "the request was malformed" apart from
"the request was fine but the account can't satisfy it".
Both kinds share LedgerError as a base so the API layer can
catch everything the service raises in one place.

InvalidArgumentError subclasses ValueError and
InsufficientFundsError subclasses RuntimeError, so code that
only knows the builtin kinds still catches them.
"""


class LedgerError(Exception):
    """Base class for every error raised by the ledger service."""


class InvalidArgumentError(LedgerError, ValueError):
    """
    The caller supplied input the ledger can't accept.

    Raised for duplicate registrations, non-positive amounts,
    empty owner names and negative opening balances.
    """


class AccountNotFoundError(InvalidArgumentError):
    """No account is registered under the given number and PIN."""


class InsufficientFundsError(LedgerError, RuntimeError):
    """A well-formed withdrawal would drive the balance below zero."""

"""Application use cases package."""

from .get_proration import GetProrationUseCase
from .manage_expenses import AddExpenseUseCase, RemoveExpenseUseCase
from .manage_home import CreateHomeUseCase, JoinHomeUseCase, ResetHomeUseCase
from .manage_members import AddMemberUseCase, RemoveMemberUseCase

__all__ = [
    "GetProrationUseCase",
    "AddExpenseUseCase",
    "RemoveExpenseUseCase",
    "CreateHomeUseCase",
    "JoinHomeUseCase",
    "ResetHomeUseCase",
    "AddMemberUseCase",
    "RemoveMemberUseCase",
]

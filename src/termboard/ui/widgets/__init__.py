"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .confirm_modal import ConfirmModal
from .task_card import TaskCard
from .task_form_modal import TaskDraft, TaskFormModal

__all__ = [
    "ConfirmModal",
    "EmptyColumnMessage",
    "KanbanColumn",
    "TaskCard",
    "TaskDraft",
    "TaskFormModal",
]

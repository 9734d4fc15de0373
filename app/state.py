from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ViewState:
    """Ephemeral dashboard state. Lives in ``st.session_state``, never in the engine."""

    selected_student: Optional[str] = None
    loading: bool = False
    message: str = ""
    is_error: bool = False

    def toggle_student(self, email: Optional[str]) -> Optional[str]:
        self.selected_student = None if self.selected_student == email else email
        return self.selected_student

    def notify(self, message: str, error: bool = False) -> None:
        self.message = message
        self.is_error = error

    def clear_message(self) -> None:
        self.message = ""
        self.is_error = False

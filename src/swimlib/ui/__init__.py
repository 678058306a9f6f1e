"""ImGui integration for the swimmer demo."""

from .ui_manager import UIManager

__all__ = ['UIManager']

"""
Controllers layer - orchestration and session state management.
"""

from controllers.shopping_controller import ShoppingController, SubmitResult, PriceTier

__all__ = ["ShoppingController", "SubmitResult", "PriceTier"]

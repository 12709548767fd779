"""
Signup-form sample application showcasing fieldcheck validation.
"""

from .demo import handle_signup, run_demo
from .forms import ALLOWED_PLANS, validate_signup

__all__ = ["ALLOWED_PLANS", "handle_signup", "run_demo", "validate_signup"]

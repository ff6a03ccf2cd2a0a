"""
Payroll views package.
"""

from .pay_views import calculate_pay, job_list

__all__ = ["calculate_pay", "job_list"]

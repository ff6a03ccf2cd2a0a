"""
Keep the pay override cache in step with the PayOverride table
"""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import PayOverride
from .services.overrides import clear_pay_overrides_cache

logger = logging.getLogger(__name__)


@receiver(post_save, sender=PayOverride)
@receiver(post_delete, sender=PayOverride)
def invalidate_pay_overrides(sender, instance, **kwargs):
    clear_pay_overrides_cache()
    logger.debug(f"Pay override cache cleared after change to override {instance.pk}")

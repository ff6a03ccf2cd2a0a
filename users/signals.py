from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserLedger


@receiver(post_save, sender=User)
def create_user_ledger(sender, instance, created, **kwargs):
    """Every account gets its ledger when it is created"""
    if created:
        UserLedger.objects.get_or_create(user=instance)

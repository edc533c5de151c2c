"""
License model.
"""
from django.db import models

from licenses.domain.license_key import MAX_KEY_LENGTH


class License(models.Model):
    """
    A time-bounded license owned by one account.

    Validity is ``expire_time`` compared to now; there is no status column.
    """

    key = models.CharField(max_length=MAX_KEY_LENGTH, unique=True, db_index=True)
    owner = models.CharField(max_length=150, db_index=True, help_text="Login of the issuing account")
    product = models.CharField(max_length=255)
    one_time = models.BooleanField(default=False, help_text="Recorded only; not enforced")
    expire_time = models.DateTimeField()
    created_at = models.DateTimeField()

    class Meta:
        db_table = "licenses"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["key", "owner"], name="licenses_key_owner_idx"),
        ]

    def __str__(self):
        return f"{self.key} ({self.product})"

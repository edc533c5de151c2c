"""
Account model.
"""
from django.db import models


class Account(models.Model):
    """
    A license owner's login and password hash.
    """

    login = models.CharField(max_length=150, unique=True, db_index=True)
    password_hash = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "accounts"
        ordering = ["login"]

    def __str__(self):
        return self.login

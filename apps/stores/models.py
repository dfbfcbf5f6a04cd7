import uuid

from django.db import models


class Store(models.Model):
    """
    Tenant root. Every catalog, customer and sales row hangs off a store.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    owner_user_id = models.UUIDField(
        verbose_name='Proprietário',
        help_text='Identificador do usuário dono da loja no provedor de autenticação'
    )
    metadata = models.JSONField(
        default=dict,
        blank=True,
        verbose_name='Metadados'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Loja'
        verbose_name_plural = 'Lojas'

    def __str__(self):
        return self.name

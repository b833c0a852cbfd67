from django.db import models
from django.db.models import F

from .exceptions import ConcurrencyConflict

TEXT_FIELDS = ('name', 'model', 'manufacturer', 'starship_class', 'crew', 'passengers')


class Starship(models.Model):
    """
    A single starship in the inventory
    """
    name = models.CharField(max_length=255, blank=True, default='')
    model = models.CharField(max_length=255, blank=True, default='')
    manufacturer = models.CharField(max_length=255, blank=True, default='')
    starship_class = models.CharField(max_length=255, blank=True, default='')
    crew = models.CharField(max_length=255, blank=True, default='')
    passengers = models.CharField(max_length=255, blank=True, default='')
    source_url = models.URLField(max_length=500, null=True, blank=True)
    version = models.PositiveIntegerField(default=1)

    class Meta:
        db_table = 'starships'
        ordering = ['id']
        verbose_name = 'Starship'
        verbose_name_plural = 'Starships'

    def __str__(self):
        return self.name

    def save_versioned(self):
        """
        Write the text fields back only if the row still carries
        ``self.version``, bumping the version on success.
        """
        values = {field: getattr(self, field) for field in TEXT_FIELDS}
        updated = Starship.objects.filter(pk=self.pk, version=self.version).update(
            version=F('version') + 1,
            **values,
        )
        if not updated:
            raise ConcurrencyConflict(
                f"Starship id={self.pk} version={self.version} was deleted or changed"
            )
        self.version += 1

from django.apps import AppConfig


class StarshipsConfig(AppConfig):
    default_auto_field = 'django.db.models.AutoField'
    name = 'starships'
    verbose_name = 'Starships'

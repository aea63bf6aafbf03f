from django.apps import AppConfig

class CoreConfig(AppConfig):
    # Dashboard i filtry szablonów wspólne dla wszystkich aplikacji
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    label = 'core'
    verbose_name = 'Sales Ops'

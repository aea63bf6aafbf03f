from django.apps import AppConfig

class ForecastConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.forecast'
    label = 'forecast'

from django.apps import AppConfig


class CodeblockLabelsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'codeblock_labels'
    verbose_name = 'Code Block Labels'

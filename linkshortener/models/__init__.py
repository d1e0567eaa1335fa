from linkshortener.models.url_record_model import ClickEventModel, UrlRecordModel, RegistryStatsModel


__all__ = [
    'ClickEventModel',
    'UrlRecordModel',
    'RegistryStatsModel',
]

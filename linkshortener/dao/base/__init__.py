from linkshortener.dao.base.registry_base_dao import RegistryBaseDAO


__all__ = ['RegistryBaseDAO']

from linkshortener.dao.file.registry_file_dao import RegistryFileDAO


__all__ = ['RegistryFileDAO']

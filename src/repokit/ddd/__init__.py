from repokit.ddd.repository_module import RepositoryModule, entity_to_dict

__all__ = ["RepositoryModule", "entity_to_dict"]

from pathcheck.containers.app_container import AppContainer

__all__ = ["AppContainer"]

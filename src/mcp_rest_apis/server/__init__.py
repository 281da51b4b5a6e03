from .stdio import create_server, build_dispatcher, serve

__all__ = ["create_server", "build_dispatcher", "serve"]

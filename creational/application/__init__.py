from .clients import run_gui_client, run_generic_client, run_creator_client

__all__ = [
    'run_gui_client',
    'run_generic_client',
    'run_creator_client',
]

from .storage import deck_path, default_deck_dir, load_deck, save_deck

__all__ = ["deck_path", "default_deck_dir", "load_deck", "save_deck"]

from backend.engine.gamegenerator.generator import TileSpawner

__all__ = ["TileSpawner"]

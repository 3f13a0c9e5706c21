"""
Saltong Game Server - Main Entry Point

This is the main entry point for the Saltong game server.
It initializes storage and the game service and starts the Flask application.
"""

from saltong import create_app
from saltong.config import Config
from saltong.models.errors import StorageUnavailableError
from saltong.services.game_service import initialize_game_service
from saltong.services.persistence import PersistenceAdapter
from saltong.services.puzzle_source import DailyPuzzleSource
from saltong.services.storage import JsonFileStorage, build_storage
from saltong.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Initialize storage
        try:
            storage = build_storage(Config)
            print(f"✓ Storage backend '{Config.STORAGE_BACKEND}' initialized successfully")
        except StorageUnavailableError as e:
            print(f"✗ Failed to initialize storage backend '{Config.STORAGE_BACKEND}': {e}")
            print(f"  Falling back to file storage at {Config.STORAGE_PATH}")
            game_logger.logger.warning(f"Storage backend unavailable, using file storage: {e}")
            storage = JsonFileStorage(Config.STORAGE_PATH)

        # Initialize game service
        puzzle_source = DailyPuzzleSource(utc_offset_hours=Config.PUZZLE_UTC_OFFSET_HOURS)
        persistence = PersistenceAdapter(storage, puzzle_source, key=Config.STORAGE_KEY)
        game_service = initialize_game_service(persistence, domain=Config.DOMAIN)
        print("✓ Game service initialized successfully")

        for mode, mode_data in (('main', game_service.user_data.main),
                                ('mini', game_service.user_data.mini),
                                ('max', game_service.user_data.max)):
            print(f"  {mode}: puzzle {mode_data.game_id} ({mode_data.game_status.value})")

        # Create Flask app
        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Saltong Server Starting")

        print(f"\nStarting Saltong Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Saltong Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()

from src.horizon_logger.horizon_logger import HorizonLogger
from src.horizon_logger.log_helpers import log_info, log_warn
from src.horizon_logger.tracing_init import init


def main():
    init()
    logger = HorizonLogger()

    # Basic logging
    logger.debug("SYSTEM", "Initializing server...")
    logger.info("NETWORK", "Player connected from 192.168.1.1")
    logger.warn("GAME", "Player attempted invalid move")
    logger.error("DATABASE", "Failed to save player state")
    logger.critical("SECURITY", "Detected potential security breach")

    # Template helpers
    log_info(logger, "PLAYER", "Player {} joined the game", "John")
    log_warn(logger, "PHYSICS", "Collision detection took {}ms", 150)

    # Multiple components
    logger.info("GAME/COMBAT", "Player dealt 50 damage")
    logger.debug("NETWORK/WEBSOCKET", "Processing message batch")

    print("\n=== History ===")
    for entry in logger.get_history():
        print(entry.to_dict())


if __name__ == "__main__":
    main()

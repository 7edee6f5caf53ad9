from asyncio import Lock
from uuid import UUID


class GameLockManager:
    def __init__(self):
        self.locks = {}  # one Lock per game_id
        self.user_counts = {}  # coroutines currently holding or waiting for each Lock
        self.lock = Lock()  # protects locks and user_counts

    async def get_lock(self, game_id: UUID) -> Lock:
        """Get the Lock of the specified game_id and register the caller as a user

        Every call must be paired with release_lock.

        Args:
            game_id (UUID): ID to identify this game

        Returns:
            Lock: Held while one move of this game is read, resolved and written
        """
        async with self.lock:
            if game_id not in self.locks:
                self.locks[game_id] = Lock()
                self.user_counts[game_id] = 0
            self.user_counts[game_id] += 1
            return self.locks[game_id]

    async def release_lock(self, game_id: UUID):
        """Unregister a user and delete the Lock once nobody uses it

        Args:
            game_id (UUID): ID to identify this game
        """
        async with self.lock:
            self.user_counts[game_id] -= 1
            if self.user_counts[game_id] == 0:
                del self.locks[game_id]
                del self.user_counts[game_id]

"""
Collision detection and handling between the player and enemies
"""


class CollisionHandler:
    """
    Resolves player/enemy contact.

    Contact is exact tile equality. Frozen enemies are skipped. Every
    remaining enemy is checked against the player's position at the time
    it is reached, so a respawn mid-check can meet another enemy waiting
    on the start tile.
    """
    def check_player_enemies(self, player, enemy_manager, on_hit):
        """
        Check the player's tile against every harmful enemy

        Args:
            player: Player object
            enemy_manager: EnemyManager object
            on_hit: Callback (enemy, x, y) called per contact with the tile
                where it happened; returns True when the session ended

        Returns:
            dict: {'hits': int, 'player_died': bool}
        """
        result = {
            'hits': 0,
            'player_died': False
        }

        for enemy in enemy_manager.get_harmful():
            if enemy.x != player.x or enemy.y != player.y:
                continue

            result['hits'] += 1
            if on_hit(enemy, player.x, player.y):
                result['player_died'] = True
                break

        return result

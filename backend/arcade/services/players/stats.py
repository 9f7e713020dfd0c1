from typing import Any, Dict, List, Optional, Tuple

GameStat = Dict[str, Any]


def fold_game_result(
    tickets: int,
    game_stats: Optional[List[GameStat]],
    game_id: str,
    tickets_earned: int,
    high_score,
) -> Tuple[int, List[GameStat]]:
    """Fold one gameplay result into a player's balance and per-game stats.

    Returns the new ticket balance and a new stats list; the inputs are not
    modified. The first entry for ``game_id`` accumulates tickets and plays
    and keeps the better high score (ties keep the stored one). A game with
    no entry yet gets a new one appended.
    """
    merged = [dict(stat) for stat in (game_stats or [])]
    for stat in merged:
        if stat['gameId'] == game_id:
            stat['ticketsEarned'] += tickets_earned
            stat['gamesPlayed'] += 1
            if high_score > stat['highScore']:
                stat['highScore'] = high_score
            break
    else:
        merged.append({
            'gameId': game_id,
            'ticketsEarned': tickets_earned,
            'gamesPlayed': 1,
            'highScore': high_score,
        })
    return (tickets or 0) + tickets_earned, merged

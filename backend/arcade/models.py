from arcade import db
import re
import uuid

KEY_PATTERN = re.compile(r'^[0-9a-f]{32}$')


def generate_key():
    """Store-assigned record key: 32 lowercase hex characters."""
    return uuid.uuid4().hex


def is_valid_key(value):
    return isinstance(value, str) and bool(KEY_PATTERN.match(value))


class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.String(32), primary_key=True, default=generate_key)
    name = db.Column(db.String(128), nullable=False)
    token_cost = db.Column(db.Float, nullable=False)
    top_player = db.Column(db.String(64), nullable=True)

    # Wire name -> column name for merge-patch updates
    UPDATABLE = {
        'name': 'name',
        'tokenCost': 'token_cost',
        'topPlayer': 'top_player',
    }

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'tokenCost': self.token_cost,
            'topPlayer': self.top_player,
        }


class Player(db.Model):
    __tablename__ = 'player'
    id = db.Column(db.String(32), primary_key=True, default=generate_key)
    player_id = db.Column(db.String(64), unique=True, nullable=True, index=True)
    first_name = db.Column(db.String(64), nullable=False)
    last_name = db.Column(db.String(64), nullable=False)
    screen_name = db.Column(db.String(64), unique=True, nullable=False, index=True)
    tokens = db.Column(db.Integer, nullable=True)
    tickets = db.Column(db.Integer, nullable=False, default=0)
    # Embedded GameStat documents: [{gameId, ticketsEarned, gamesPlayed, highScore}]
    game_stats = db.Column(db.JSON, nullable=False, default=list)
    version = db.Column(db.Integer, nullable=False, default=1)

    # gameStats is deliberately absent: it only changes through publishStats
    UPDATABLE = {
        'playerId': 'player_id',
        'firstName': 'first_name',
        'lastName': 'last_name',
        'screenName': 'screen_name',
        'tokens': 'tokens',
        'tickets': 'tickets',
    }

    def to_dict(self):
        return {
            'id': self.id,
            'playerId': self.player_id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'screenName': self.screen_name,
            'tokens': self.tokens,
            'tickets': self.tickets,
            'gameStats': [dict(stat) for stat in (self.game_stats or [])],
        }


class Prize(db.Model):
    __tablename__ = 'prize'
    id = db.Column(db.String(32), primary_key=True, default=generate_key)
    name = db.Column(db.String(128), nullable=False)
    description = db.Column(db.Text, nullable=True)
    ticket_cost = db.Column(db.Integer, nullable=False)
    available_quantity = db.Column(db.Integer, nullable=False)
    image = db.Column(db.Text, nullable=True)  # opaque reference (URL or asset key)
    version = db.Column(db.Integer, nullable=False, default=1)

    UPDATABLE = {
        'name': 'name',
        'description': 'description',
        'ticketCost': 'ticket_cost',
        'availableQuantity': 'available_quantity',
        'image': 'image',
    }

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'ticketCost': self.ticket_cost,
            'availableQuantity': self.available_quantity,
            'image': self.image,
        }

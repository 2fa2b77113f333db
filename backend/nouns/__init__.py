from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from nouns.config import Config

allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from nouns.main import main
    flask_app.register_blueprint(main)

    from nouns.api.games import games
    # Mount game routes under /api to match frontend API client
    flask_app.register_blueprint(games, url_prefix='/api/games')

    # Register Socket.IO event handlers
    # Importing here ensures the handlers bind to the initialized socketio instance
    from nouns.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('sample-game')
    @click.option('--seed', default=7, show_default=True, help='Random seed for word draws.')
    @click.option('--words', 'word_count', default=6, show_default=True, help='Number of sample words.')
    def sample_game_command(seed, word_count):
        """Plays a simulated game offline and prints the final stats."""
        from nouns.simulation import play_sample_game
        game = play_sample_game(seed=seed, word_count=word_count,
                                turn_duration=flask_app.config.get('TURN_DURATION_SEC', 60))
        click.echo(f"Winner: {game.get_winner() or 'tie'}")
        click.echo(f"Scores: team 1 = {game.scores.team1_score}, team 2 = {game.scores.team2_score}")
        for row in game.get_words_per_minute_data():
            click.echo(f"{row.round.short_description}: team 1 wpm = {_fmt(row.team1_wpm)}, "
                       f"team 2 wpm = {_fmt(row.team2_wpm)}")
        for stat in game.get_word_statistics()[:3]:
            click.echo(f"Hardest: {stat.word.text} avg={stat.average_time:.1f}s skips={stat.skips}")

    flask_app.cli.add_command(sample_game_command)

    return flask_app


def _fmt(wpm):
    return '-' if wpm is None else f"{wpm:.1f}"

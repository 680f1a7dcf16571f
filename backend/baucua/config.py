import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    DEBUG = os.environ.get('DEBUG', '0').lower() in ('1', 'true', 'yes')
    PORT = int(os.environ.get('PORT', '3001'))
    # Extra browser origin allowed next to the local dev servers (e.g. the deployed client)
    CLIENT_ORIGIN = os.environ.get('CLIENT_ORIGIN')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Room limits
    MAX_PLAYERS = int(os.environ.get('MAX_PLAYERS', '4'))
    STARTING_COINS = int(os.environ.get('STARTING_COINS', '100'))
    CHAT_HISTORY_LIMIT = int(os.environ.get('CHAT_HISTORY_LIMIT', '50'))

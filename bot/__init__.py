"""
Bot wiring: configuration, database and the discord client.
"""

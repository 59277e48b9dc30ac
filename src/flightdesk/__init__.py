"""
flightdesk keeps flights, passengers and tickets in memory, saves them to plain text files, and offers an interactive
console (and optionally a websocket departure board) on top. Run it with `python -m flightdesk`.
"""

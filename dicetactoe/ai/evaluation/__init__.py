# Static evaluation and win detection

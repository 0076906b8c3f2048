# AI: win detection, evaluation, search and the engine controller

# Board, players, dice and the match state machine

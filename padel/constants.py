"""Constants for the padel planner."""

# Team identifiers used in match records
TEAM_IDS = ('team1', 'team2')

# 2 vs 2 matches
TEAM_SIZE = 2
PLAYERS_PER_MATCH = 4

# Availability status values as stored on disk
STATUS_UNAVAILABLE = 0
STATUS_TENTATIVE = 1
STATUS_AVAILABLE = 2

STATUS_LABELS = {
    STATUS_UNAVAILABLE: 'unavailable',
    STATUS_TENTATIVE: 'tentative',
    STATUS_AVAILABLE: 'available',
}

# Data files kept by the season store
AVAILABILITY_FILE = 'availability.json'
MATCHES_FILE = 'matches.json'
RESULTS_FILE = 'results.json'
LEAGUE_CONFIG_FILE = 'league_config.json'

"""
Shared fixtures - small CSV exports of the four league tables.
"""
import pytest

MASTER_CSV = """player_name,team,player_role,season,match_id,match_id_unique,match_date,venue,runs_scored,balls_faced,fours,sixes,strike_rate,out_status,overs_bowled,runs_conceded,wickets_taken,economy_rate,catches,batting_team,opposition,match_result
Aasif Sheikh,Kathmandu Gorkhas,Wicket Keeper,1,1,S1M1,2024-11-30,"TU Ground, Kirtipur",45,30,5,1,150.0,Yes,,,,,2,Kathmandu Gorkhas,Lumbini Lions,Win
Sandeep Lamichhane,Kathmandu Gorkhas,Bowler,1,1,S1M1,2024-11-30,"TU Ground, Kirtipur",,,,,,No,4.0,22,3,5.5,0,Kathmandu Gorkhas,Lumbini Lions,Win
Rohit Paudel,Lumbini Lions,Batsman,1,1,S1M1,2024-11-30,"TU Ground, Kirtipur",abc,12.0,1,0,,Yes,,,,,,Lumbini Lions,Kathmandu Gorkhas,Loss
,Lumbini Lions,Batsman,1,1,S1M1,2024-11-30,"TU Ground, Kirtipur",10,10,0,0,,No,,,,,,Lumbini Lions,Kathmandu Gorkhas,Loss
"""

TEAM_SUMMARY_CSV = """team,Win,Loss,Tie,Total,Win_Rate,Performance
Kathmandu Gorkhas,5,3,0,8,62.5,Good
Lumbini Lions,2,6,0,8,25.0,Poor
"""

TOSS_IMPACT_CSV = """Toss_Status,Total_Matches,Wins,Losses,Ties,Win_Rate
Won Toss,32,18,14,0,56.25
Lost Toss,32,14,18,0,43.75
"""

MATCH_RESULTS_CSV = """match_id_unique,team,opposition,match_result,match_date,venue,season,toss_winner,toss_decision,won,lost,tied,toss_won
S1M1,Kathmandu Gorkhas,Lumbini Lions,Win,2024-11-30,"TU Ground, Kirtipur",1,Kathmandu Gorkhas,bat,1,0,0,1
S1M1,Lumbini Lions,Kathmandu Gorkhas,Loss,2024-11-30,"TU Ground, Kirtipur",1,Kathmandu Gorkhas,bat,0,1,0,0
"""


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding all four league exports."""
    (tmp_path / "npl_master.csv").write_text(MASTER_CSV)
    (tmp_path / "team_performance_summary.csv").write_text(TEAM_SUMMARY_CSV)
    (tmp_path / "toss_impact.csv").write_text(TOSS_IMPACT_CSV)
    (tmp_path / "match_level_results.csv").write_text(MATCH_RESULTS_CSV)
    return tmp_path

"""
Example roster for demos and tests.

A small department with rank, staff/dev flags and a couple of free-form
and numeric columns.
"""

EXAMPLE_ROSTER_CSV = """name,Rank,Staff,Dev,Species,Hours
Ada,LPD Recruit,True,False,Cat,2
Lee,LPD Recruit,False,False,Fox,10
Karet,Sergeant,True,True,Wolf,120
Mika,Officer,False,True,,45.5
Rin,Lieutenant,True,False,Cat,300
"""


def build_example_roster_csv(recruits: int = 0) -> str:
    """
    Example CSV, optionally padded with generated recruits.

    Generated rows are named Recruit1..RecruitN with no flags set.
    """
    lines = [EXAMPLE_ROSTER_CSV.rstrip("\n")]
    for i in range(1, recruits + 1):
        lines.append(f"Recruit{i},LPD Recruit,False,False,Human,{i}")
    return "\n".join(lines) + "\n"

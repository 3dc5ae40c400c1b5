"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest

from combatlog.parser import CombatLogParser

SAMPLE_LOG_LINES = [
    '3/9 19:05:22.252  SPELL_CAST_SUCCESS,0x000000000014EABC,"Draleofdeath",0x512,0x000000000014EABC,"Draleofdeath",0x512,25899,"Greater Blessing of Sanctuary",0x2',
    '3/9 19:05:30.100  SWING_DAMAGE,0x0000000000137E20,"Telta",0x514,0xF130005C3B000001,"Dragonflayer Ironhelm",0xa48,1500,0,1,0,0,0,nil,nil,nil',
    '3/9 19:05:31.000  SPELL_DAMAGE,0xF130005C3B000001,"Dragonflayer Ironhelm",0xa48,0x0000000000137E20,"Telta",0x514,42702,"Heroic Strike",0x1,800,0,1,0,0,0,nil,nil,nil',
    '3/9 19:05:32.000  SPELL_HEAL,0x000000000012DC52,"Erle",0x514,0x0000000000137E20,"Telta",0x514,48785,"Flash of Light",0x2,1709,0,0,nil',
    '3/9 19:05:33.000  SPELL_PERIODIC_HEAL,0x000000000012DC52,"Erle",0x514,0x0000000000137E20,"Telta",0x514,53563,"Beacon of Light",0x2,500,100,0,nil',
    '3/9 19:05:34.000  RANGE_DAMAGE,0x0000000000137E20,"Telta",0x514,0xF130005C3B000001,"Dragonflayer Ironhelm",0xa48,75,"Auto Shot",0x1,2000,500,1,0,0,0,1,nil,nil',
    '3/9 19:05:35.000  UNIT_DIED,0x0000000000000000,nil,0x80000000,0xF130005C3B000001,"Dragonflayer Ironhelm",0xa48',
    '3/9 19:06:10.000  ENVIRONMENTAL_DAMAGE,0x0000000000000000,nil,0x80000000,0x0000000000137E20,"Telta",0x514,FALLING,350,0,1,0,0,0,nil,nil,nil',
    '3/9 19:07:00.000  SPELL_DAMAGE,0x000000000012DC52,"Erle",0x514,0xF130005C3B000002,"Proto-Drake Handler",0xa48,48806,"Hammer of Wrath",0x2,3000,0,2,0,0,0,1,nil,nil',
    '3/9 19:07:01.000  SWING_DAMAGE,0xF130005C3B000002,"Proto-Drake Handler",0xa48,0x000000000012DC52,"Erle",0x514,400,0,1,0,0,0,nil,nil,nil',
    '3/9 19:07:02.000  UNIT_DIED,0x0000000000000000,nil,0x80000000,0xF130005C3B000002,"Proto-Drake Handler",0xa48',
]

MALFORMED_LOG_LINES = [
    "garbage line without a proper head",
    '3/9 19:08:00.000  SPELL_FOO,0x0000000000137E20,"Telta",0x514,0x0000000000137E20,"Telta",0x514',
    '13/45 19:08:00.000  SWING_DAMAGE,0x0000000000137E20,"Telta",0x514,0xF130005C3B000001,"Dragonflayer Ironhelm",0xa48,1500',
    '3/9 19:08:01.000  SPELL_CAST_SUCCESS,0x0000000000137E20,"Telta",0x514,0x0000000000000000,nil,0x80000000,75,"Auto Shot",0x1',
]


@pytest.fixture
def sample_log_lines():
    """Well formed combat log lines: two pulls with an environmental hit between them."""
    return list(SAMPLE_LOG_LINES)


@pytest.fixture
def sample_log_text():
    return "\n".join(SAMPLE_LOG_LINES) + "\n"


@pytest.fixture
def mixed_log_text():
    """Sample lines with malformed lines interleaved at lines 2, 5, 8 and 11."""
    lines = list(SAMPLE_LOG_LINES)
    for i, bad in enumerate(MALFORMED_LOG_LINES):
        lines.insert(1 + i * 3, bad)
    return "\n".join(lines) + "\n"


@pytest.fixture
def sample_log_file(tmp_path, sample_log_text):
    path = tmp_path / "WoWCombatLog.txt"
    path.write_text(sample_log_text)
    return path


@pytest.fixture
def parser():
    return CombatLogParser(year=2019, require_target=True)


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")

"""MCP Server for the soccer curriculum knowledge base."""

from datetime import date
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from .curriculum import (
    get_all_categories,
    get_all_periods,
    get_periods_with_skill,
    get_phases_for_period,
    get_skills_for_period_and_category,
    get_sub_skills_for_skill,
    map_keyword_to_curriculum,
    map_keyword_to_curriculum_for_period,
)
from .keywords import (
    get_keyword_for_skill,
    get_keywords_for_period_and_phase,
    get_keywords_for_selection,
    search_keywords,
)
from .logging_config import configure_logging, get_logger
from .models import CurriculumMatch, KeywordRecord
from .objectives import map_objectives_to_curriculum
from .schedule import get_current_focus

# Initialize the server
server = FastMCP("soccer-curriculum-kb")

logger = get_logger(__name__)


def _text(output: str) -> list[TextContent]:
    return [TextContent(type="text", text=output)]


def _format_match(match: CurriculumMatch) -> str:
    path = " / ".join(match.path or (match.skill,))
    return f"- **{match.period}** / {match.category} / {path}\n"


def _format_keyword(record: KeywordRecord) -> str:
    output = f"- **{record.keyword}**"
    location = [part for part in (record.category, record.period, record.phase) if part]
    if location:
        output += f" ({' / '.join(location)})"
    output += "\n"
    if record.synonyms:
        output += f"  Synonyms: {', '.join(record.synonyms)}\n"
    if record.positions:
        output += f"  Positions: {', '.join(record.positions)}\n"
    return output


# ============================================================================
# Curriculum Tools
# ============================================================================


@server.tool()
async def list_periods() -> list[TextContent]:
    """List the curriculum periods and categories."""
    logger.info("tool_called", tool="list_periods")

    output = "**Periods:**\n"
    for period in get_all_periods():
        phases = get_phases_for_period(period)
        output += f"- {period} (tactical phases: {', '.join(phases) or 'none'})\n"
    output += "\n**Categories:**\n"
    for category in get_all_categories():
        output += f"- {category}\n"

    return _text(output)


@server.tool()
async def list_skills(period: str, category: str) -> list[TextContent]:
    """List the skills of a period and category.

    Args:
        period: Period key or alias (build-out, middle-third, final-third, wide-play)
        category: technical, physical, mental or tactical
    """
    logger.info("tool_called", tool="list_skills", period=period, category=category)

    skills = get_skills_for_period_and_category(period, category)
    if not skills:
        return _text(f"No skills found for period '{period}' and category '{category}'")

    output = f"Found {len(skills)} skill(s) in {period} / {category}:\n\n"
    for skill in skills:
        output += f"- **{skill}**\n"
        sub_skills = get_sub_skills_for_skill(period, category, skill)
        if sub_skills:
            output += f"  Sub-skills: {', '.join(sub_skills)}\n"

    return _text(output)


@server.tool()
async def get_sub_skills(period: str, category: str, skill: str) -> list[TextContent]:
    """Get the sub-skills of a skill.

    Args:
        period: Period key or alias
        category: Category key
        skill: Skill key (e.g., "first-touch")
    """
    logger.info("tool_called", tool="get_sub_skills", period=period, category=category, skill=skill)

    sub_skills = get_sub_skills_for_skill(period, category, skill)
    if not sub_skills:
        return _text(f"No sub-skills found for '{skill}' in {period} / {category}")

    output = f"**{skill}** sub-skills ({period} / {category}):\n\n"
    for sub_skill in sub_skills:
        output += f"- {sub_skill}\n"

    return _text(output)


@server.tool()
async def find_periods_with_skill(skill: str, category: str = "technical") -> list[TextContent]:
    """Find the periods that teach a skill.

    Args:
        skill: Skill key (e.g., "turning")
        category: Category key, technical by default
    """
    logger.info("tool_called", tool="find_periods_with_skill", skill=skill, category=category)

    periods = get_periods_with_skill(skill, category)
    if not periods:
        return _text(f"No periods found with skill '{skill}' in {category}")

    return _text(f"**{skill}** is taught in: {', '.join(periods)}")


@server.tool()
async def map_keyword(keyword: str, period: Optional[str] = None) -> list[TextContent]:
    """Map a keyword to curriculum topics.

    Args:
        keyword: Free-text keyword (e.g., "escape moves")
        period: Optional period; only the first match in that period is returned
    """
    logger.info("tool_called", tool="map_keyword", keyword=keyword, period=period)

    if period:
        match = map_keyword_to_curriculum_for_period(keyword, period)
        matches = [match] if match else []
    else:
        matches = map_keyword_to_curriculum(keyword)

    if not matches:
        return _text(f"No curriculum topics found matching '{keyword}'")

    output = f"Found {len(matches)} curriculum topic(s) for '{keyword}':\n\n"
    for match in matches:
        output += _format_match(match)

    return _text(output)


@server.tool()
async def map_objectives(objectives: str, period: Optional[str] = None) -> list[TextContent]:
    """Map session objective text to curriculum topics.

    Args:
        objectives: Objective text written by a coach
        period: Optional period to scope the mapping
    """
    logger.info("tool_called", tool="map_objectives", period=period)

    matches = map_objectives_to_curriculum(objectives, period)
    if not matches:
        return _text("No curriculum topics found in the objectives")

    output = f"Found {len(matches)} curriculum topic(s):\n\n"
    for match in matches:
        output += _format_match(match)

    return _text(output)


# ============================================================================
# Keyword Tools
# ============================================================================


@server.tool()
async def search_curriculum_keywords(search_term: str, category: Optional[str] = None) -> list[TextContent]:
    """Search keywords and synonyms.

    Args:
        search_term: Text to search for (partial match supported)
        category: Optional category filter (tactical, technical, physical, mental)
    """
    logger.info("tool_called", tool="search_curriculum_keywords", search_term=search_term, category=category)

    results = search_keywords(search_term, category)
    if not results:
        return _text(f"No keywords found matching '{search_term}'")

    output = f"Found {len(results)} keyword(s):\n\n"
    for record in results:
        output += _format_keyword(record)

    return _text(output)


@server.tool()
async def get_skill_keywords(category: str, skill: str) -> list[TextContent]:
    """Get the keyword and synonyms used to tag drills for a skill.

    Args:
        category: Category key
        skill: Skill key, or a tactical key such as "plus-1"
    """
    logger.info("tool_called", tool="get_skill_keywords", category=category, skill=skill)

    record = get_keyword_for_skill(category, skill)
    if record is None:
        return _text(f"No keyword found for '{skill}' in {category}")

    output = f"**{record.keyword}**\n\n"
    output += f"- Terms: {', '.join(record.all_terms)}\n"
    if record.period:
        output += f"- Period: {record.period}\n"
    if record.phase:
        output += f"- Phase: {record.phase}\n"

    return _text(output)


@server.tool()
async def get_tactical_keywords(
    period: str, phase: Optional[str] = None, position: Optional[str] = None
) -> list[TextContent]:
    """Get tactical keywords of a period, optionally by phase and position.

    Args:
        period: Period key or alias
        phase: Optional phase (attacking, defending, transition-d-to-a, transition-a-to-d)
        position: Optional position (GK, Defenders, Midfielders, Forwards)
    """
    logger.info("tool_called", tool="get_tactical_keywords", period=period, phase=phase, position=position)

    phases = [phase] if phase else get_phases_for_period(period)
    results = []
    for phase_key in phases:
        results.extend(get_keywords_for_period_and_phase(period, phase_key, position))

    if not results:
        return _text(f"No tactical keywords found for '{period}'")

    output = f"Found {len(results)} tactical keyword(s):\n\n"
    for record in results:
        output += _format_keyword(record)

    return _text(output)


@server.tool()
async def get_selection_keywords(category: Optional[str] = None, period: Optional[str] = None) -> list[TextContent]:
    """Get the flat keyword list used for keyword selection.

    Args:
        category: Optional category filter
        period: Optional period (tactical only)
    """
    logger.info("tool_called", tool="get_selection_keywords", category=category, period=period)

    keywords = get_keywords_for_selection(category, period)
    if not keywords:
        return _text("No keywords found")

    return _text(f"{len(keywords)} keyword(s):\n\n" + "\n".join(keywords))


@server.tool()
async def get_curriculum_focus(on_date: Optional[str] = None) -> list[TextContent]:
    """Get the curriculum focus for a date.

    Args:
        on_date: Optional ISO date (e.g., "2025-11-20"); today by default
    """
    logger.info("tool_called", tool="get_curriculum_focus", on_date=on_date)

    try:
        when = date.fromisoformat(on_date) if on_date else None
    except ValueError:
        return _text(f"Invalid date '{on_date}', expected YYYY-MM-DD")

    focus = get_current_focus(when)
    output = f"**CURRENT FOCUS: {focus.focus}**\n\n"
    if focus.period:
        output += f"- Period: {focus.period}\n"
    output += f"- Related: {', '.join(focus.related_terms)}\n"

    return _text(output)


def run() -> None:
    """Run the MCP server over stdio."""
    configure_logging()
    logger.info("server_starting", name="soccer-curriculum-kb")
    server.run()


if __name__ == "__main__":
    run()

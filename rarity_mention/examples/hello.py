"""Example graph that greets everyone who joins a guild.

This example demonstrates:
- Mentioning members as they tick in
- Mentioning several roles in one message
- Dropping values that can't be mentioned without stopping the graph
"""

import logging
from datetime import datetime, timedelta

import csp
from csp import ts

from rarity_mention import Emoji, GuildId, Member, MentionConfig, RoleId, User, mention_all_ts, mention_ts

logging.basicConfig(level=logging.INFO)

GUILD_ID = GuildId(81384788765712384)
WAVE = Emoji(id=396521773144866826, name="wave", animated=True)
STAFF_ROLES = [RoleId(81384788862181376), RoleId(103894535553642496)]


@csp.node
def welcome(mention: ts[str]) -> ts[str]:
    """Build the welcome message for a mentioned member."""
    if csp.ticked(mention):
        return f"Welcome {mention}! {WAVE.mention()}"


@csp.node
def staff() -> ts[[object]]:
    with csp.alarms():
        a_ping = csp.alarm(bool)

    with csp.start():
        csp.schedule_alarm(a_ping, timedelta(seconds=3), True)

    if csp.ticked(a_ping):
        return STAFF_ROLES


def graph():
    joins = csp.curve(
        object,
        [
            (timedelta(seconds=1), Member(guild_id=GUILD_ID, user=User(id=80351110224678912, name="Nelly"))),
            (timedelta(seconds=2), Member(guild_id=GUILD_ID, user=User(id=80088516616269824, name="Danny"))),
            (timedelta(seconds=4), "not a member"),
        ],
    )
    csp.print("Welcome", welcome(mention_ts(joins)))
    csp.print("Staff ping", mention_all_ts(staff(), config=MentionConfig(separator=", ")))


if __name__ == "__main__":
    csp.run(graph, starttime=datetime.now(), endtime=timedelta(seconds=5))

"""
Command Registry Tests
----------------------
Registration, direct/alias/lazy resolution and priority tie-breaking.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from commands import (
    AliasCommandContainer,
    Category,
    CommandContext,
    CommandPriority,
    ConfigurationError,
    DuplicateCommandPrefixError,
)
from commands.command_registry import first_token
from repositories.guild_repository import GuildSettings


def guild(**kwargs) -> GuildSettings:
    return GuildSettings(guild_id="123456789012345678", **kwargs)


class TestRegistration:
    """Tests for register()."""

    def test_register_returns_container(self, registry, make_command):
        command = make_command("ping")
        container = registry.register(command)

        assert container.command is command
        assert container.category.name == "Utility"
        assert container.default_prefix == "!"
        assert container.triggers == ("ping",)
        assert len(registry) == 1

    def test_explicit_category_overrides_lookup(self, registry, make_command):
        container = registry.register(make_command("ping"), Category("Custom", "$"))

        assert container.default_prefix == "$"
        assert registry.resolve("$ping") is container

    def test_duplicate_trigger_fails(self, registry, make_command):
        registry.register(make_command("ping"))

        with pytest.raises(DuplicateCommandPrefixError) as exc_info:
            registry.register(make_command("pong", ["pong", "ping"]))

        error = exc_info.value
        assert error.prefix == "!ping"
        assert error.command_name == "pong"
        assert error.conflicting_name == "ping"
        assert isinstance(error, ConfigurationError)

    def test_duplicate_does_not_mutate_registry(self, registry, make_command):
        original = registry.register(make_command("ping"))

        with pytest.raises(DuplicateCommandPrefixError):
            registry.register(make_command("other", ["other", "ping"]))

        assert len(registry) == 1
        assert registry.get_all() == [original]
        assert registry.resolve("!other") is None

    def test_duplicate_is_case_insensitive(self, registry, make_command):
        registry.register(make_command("ping"))

        with pytest.raises(DuplicateCommandPrefixError):
            registry.register(make_command("shout", ["PING"]))

    def test_collision_across_categories_with_same_prefix(self, registry, make_command):
        registry.register(make_command("ping"), Category("One", "!"))

        with pytest.raises(DuplicateCommandPrefixError):
            registry.register(make_command("ping2", ["ping"]), Category("Two", "!"))

    def test_same_trigger_with_different_prefix_is_allowed(self, registry, make_command):
        registry.register(make_command("ping"))
        registry.register(make_command("fun-ping", ["ping"], category="Fun"))

        assert len(registry) == 2
        assert registry.resolve("!ping").name == "ping"
        assert registry.resolve("?ping").name == "fun-ping"

    def test_unknown_category_fails(self, registry, make_command):
        with pytest.raises(ConfigurationError, match="Invalid command category"):
            registry.register(make_command("ping", category="Nope"))

        assert len(registry) == 0

    def test_missing_description_fails(self, registry, make_command):
        with pytest.raises(ConfigurationError, match="description"):
            registry.register(make_command("ping", description=None))

    def test_missing_triggers_fails(self, registry, make_command):
        with pytest.raises(ConfigurationError, match="trigger"):
            registry.register(make_command("ping", triggers=[]))

    def test_concurrent_registration_keeps_every_command(self, registry, make_command):
        commands = [make_command(f"cmd{i}") for i in range(50)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(registry.register, commands))

        assert len(registry) == 50
        assert all(registry.resolve(f"!cmd{i}") is not None for i in range(50))


class TestResolve:
    """Tests for resolve()."""

    def test_example_ping_and_p(self, registry, make_command):
        ping = registry.register(make_command("ping"))
        p = registry.register(make_command("p", priority=CommandPriority.HIGH))

        assert registry.resolve("!ping") is ping
        assert registry.resolve("!p") is p

    def test_only_first_token_is_matched(self, registry, make_command):
        ping = registry.register(make_command("ping"))

        assert registry.resolve("!ping some arguments") is ping
        assert registry.resolve("hello !ping") is None

    def test_not_found_returns_none(self, registry, make_command):
        registry.register(make_command("ping"))

        assert registry.resolve("!pong") is None
        assert registry.resolve("ping") is None
        assert registry.resolve("") is None
        assert registry.resolve("   ") is None

    def test_case_insensitive(self, registry, make_command):
        ping = registry.register(make_command("ping", category="Bare"))

        assert registry.resolve("PING") is ping
        assert registry.resolve("ping") is ping
        assert registry.resolve("PiNg") is registry.resolve("ping")

    def test_is_idempotent(self, registry, make_command):
        registry.register(make_command("ping"))
        context = CommandContext()

        results = {id(registry.resolve("!ping", context)) for _ in range(5)}
        assert len(results) == 1

    def test_guild_prefix_override(self, registry, make_command):
        ping = registry.register(make_command("ping"))
        context = CommandContext(guild=guild(prefixes={"Utility": "%"}))

        assert registry.resolve("%ping", context) is ping
        assert registry.resolve("!ping", context) is None
        assert registry.resolve("!ping") is ping

    @pytest.mark.parametrize("high_first", [True, False])
    def test_priority_tie_break_ignores_registration_order(self, registry, make_command, high_first):
        low = make_command("low-ping", ["ping"], category="Utility", priority=CommandPriority.LOW)
        high = make_command("high-ping", ["ping"], category="Fun", priority=CommandPriority.HIGH)

        for command in ([high, low] if high_first else [low, high]):
            registry.register(command)

        # Fun commands answer to "!" in this guild as well
        context = CommandContext(guild=guild(prefixes={"fun": "!"}))

        assert registry.resolve("!ping", context).name == "high-ping"

    def test_equal_priority_keeps_first_registered(self, registry, make_command):
        registry.register(make_command("first", ["ping"], category="Utility"))
        registry.register(make_command("second", ["ping"], category="Fun"))
        context = CommandContext(guild=guild(prefixes={"fun": "!"}))

        assert registry.resolve("!ping", context).name == "first"

    def test_ignored_priority_still_resolves_with_prefix(self, registry, make_command):
        hidden = registry.register(make_command("hidden", priority=CommandPriority.IGNORED))

        assert registry.resolve("!hidden") is hidden

    def test_custom_prefix_generation(self, registry, make_command):
        command = make_command("mention")
        command.generate_command_prefix = lambda context, category: "<@1> "
        container = registry.register(command)

        # Only the first token is compared, so a prefix with a space can never match
        assert registry.resolve("<@1> mention") is None
        assert container.generate_prefix(None) == "<@1> "


class TestResolveWithAlias:
    """Tests for alias resolution."""

    def test_alias_with_arguments(self, registry, make_command):
        ping = registry.register(make_command("ping", category="Bare"))
        settings = guild(aliases={"g!": "ping extra"})
        context = CommandContext(guild=settings)

        container = registry.resolve_with_alias("g!", context, settings)

        assert isinstance(container, AliasCommandContainer)
        assert container.command is ping.command
        assert container.alias_arguments == ("extra",)

    def test_alias_target_uses_prefix(self, registry, make_command):
        ping = registry.register(make_command("ping"))
        settings = guild(aliases={"p": "!ping"})

        container = registry.resolve_with_alias("p", CommandContext(guild=settings), settings)

        assert container is ping
        assert not isinstance(container, AliasCommandContainer)

    def test_alias_matches_by_prefix_of_token(self, registry, make_command):
        registry.register(make_command("ping"))
        settings = guild(aliases={"pi": "!ping fast"})

        container = registry.resolve_with_alias("PIKACHU now", CommandContext(guild=settings), settings)

        assert container.name == "ping"
        assert container.alias_arguments == ("fast",)

    def test_direct_match_wins_over_alias(self, registry, make_command):
        ping = registry.register(make_command("ping"))
        registry.register(make_command("pong"))
        settings = guild(aliases={"!ping": "!pong"})

        assert registry.resolve_with_alias("!ping", CommandContext(guild=settings), settings) is ping

    def test_winning_alias_supplies_arguments(self, registry, make_command):
        registry.register(make_command("low", priority=CommandPriority.LOW))
        registry.register(make_command("high", priority=CommandPriority.HIGH))
        settings = guild(aliases={"ab": "!high from-high", "a": "!low from-low"})

        container = registry.resolve_with_alias("abc", CommandContext(guild=settings), settings)

        assert container.name == "high"
        assert container.alias_arguments == ("from-high",)

    def test_alias_to_unknown_command(self, registry, make_command):
        registry.register(make_command("ping"))
        settings = guild(aliases={"x": "!missing arg"})

        assert registry.resolve_with_alias("x", CommandContext(guild=settings), settings) is None

    def test_no_guild_or_aliases(self, registry, make_command):
        registry.register(make_command("ping"))

        assert registry.resolve_with_alias("g!") is None
        assert registry.resolve_with_alias("g!", None, guild()) is None


class TestResolveLazy:
    """Tests for resolve_lazy()."""

    def test_matches_bare_trigger(self, registry, make_command):
        ping = registry.register(make_command("ping", ["ping", "pong"]))

        assert registry.resolve_lazy("pong") is ping
        assert registry.resolve_lazy("PING") is ping
        assert registry.resolve_lazy("!ping") is None

    def test_skips_ignored_commands(self, registry, make_command):
        registry.register(make_command("hidden", priority=CommandPriority.IGNORED))

        assert registry.resolve_lazy("hidden") is None

    def test_ignored_command_does_not_shadow_visible_one(self, registry, make_command):
        registry.register(make_command("hidden", ["help"], category="Administration",
                                       priority=CommandPriority.IGNORED))
        visible = registry.register(make_command("help", category="Utility",
                                                 priority=CommandPriority.LOWEST))

        assert registry.resolve_lazy("help") is visible

    def test_priority_tie_break(self, registry, make_command):
        registry.register(make_command("normal", ["stats"], category="Utility"))
        highest = registry.register(make_command("highest", ["stats"], category="Fun",
                                                 priority=CommandPriority.HIGHEST))

        assert registry.resolve_lazy("stats") is highest


class TestLookups:
    """Tests for get_command(), get_all() and get_by_category()."""

    def test_get_command_by_instance(self, registry, make_command):
        ping = make_command("ping")
        container = registry.register(ping)

        assert registry.get_command(ping) is container
        assert registry.get_command(make_command("other")) is None

    def test_get_all_and_by_category(self, registry, make_command):
        registry.register(make_command("ping"))
        registry.register(make_command("joke", category="Fun"))

        assert {c.name for c in registry.get_all()} == {"ping", "joke"}
        assert [c.name for c in registry.get_by_category("fun")] == ["joke"]

    def test_first_token(self):
        assert first_token("  !Ping  a b") == "!ping"
        assert first_token("") == ""
        assert first_token(None) == ""


class TestCommandPriority:
    """Tests for the priority enum."""

    def test_ordering(self):
        assert CommandPriority.HIGH.is_greater_than(CommandPriority.NORMAL)
        assert not CommandPriority.IGNORED.is_greater_than(CommandPriority.LOWEST)

    def test_from_name(self):
        assert CommandPriority.from_name("high") is CommandPriority.HIGH

        with pytest.raises(ValueError):
            CommandPriority.from_name("urgent")

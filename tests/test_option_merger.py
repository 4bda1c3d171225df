from cmdy.menu.option_merger import declared_script_paths, merge_options
from cmdy.models.menu_option import MenuOption

PREFIXES = ["./scripts/examples", "./scripts/user", "./scripts"]
OS_KEYS = ("linux", "mac", "windows")


def script(display, path):
    return MenuOption.from_script(display, path, OS_KEYS)


def test_merge_appends_discovered_after_declared(build_option):
    discovered = [script("deploy", "./scripts/deploy.sh")]
    merged = merge_options([build_option], discovered, PREFIXES)
    assert [o.display for o in merged] == ["Build", "deploy"]


def test_merge_suppresses_declared_script_path():
    discovered = [script("deploy", "./scripts/deploy.sh")]
    declared = [MenuOption("Build", {"linux": "./scripts/deploy.sh"})]

    merged = merge_options(declared, discovered, PREFIXES)

    assert [o.display for o in merged] == ["Build"]


def test_any_os_key_counts_as_declared():
    declared = [MenuOption("Mac deploy", {"mac": "./scripts/user/deploy.sh"})]
    discovered = [script("[user] deploy", "./scripts/user/deploy.sh")]
    assert merge_options(declared, discovered, PREFIXES) == declared


def test_spelling_differences_are_not_duplicates():
    # Confronto testuale: nessuna normalizzazione del percorso
    declared = [MenuOption("Deploy", {"linux": "./scripts//deploy.sh"})]
    discovered = [script("deploy", "./scripts/deploy.sh")]
    merged = merge_options(declared, discovered, PREFIXES)
    assert [o.display for o in merged] == ["Deploy", "deploy"]


def test_paths_outside_script_dirs_are_ignored():
    declared = [MenuOption("Other", {"linux": "./tools/deploy.sh"})]
    assert declared_script_paths(declared, PREFIXES) == set()


def test_declared_paths_with_arguments_do_not_match_bare_script():
    declared = [MenuOption("Deploy prod", {"linux": "./scripts/deploy.sh prod"})]
    discovered = [script("deploy", "./scripts/deploy.sh")]
    assert len(merge_options(declared, discovered, PREFIXES)) == 2


def test_order_is_preserved():
    declared = [MenuOption(name, {"linux": name}) for name in ("c", "a", "b")]
    discovered = [script(name, f"./scripts/{name}.sh") for name in ("z", "x", "y")]
    discovered.insert(1, script("dup", "./scripts/dup.sh"))
    declared.append(MenuOption("dup cfg", {"windows": "./scripts/dup.sh"}))

    merged = merge_options(declared, discovered, PREFIXES)

    assert [o.display for o in merged] == ["c", "a", "b", "dup cfg", "z", "x", "y"]


def test_merge_of_nothing_is_empty():
    assert merge_options([], [], PREFIXES) == []


def test_duplicate_display_names_are_kept():
    declared = [MenuOption("deploy", {"linux": "make deploy"})]
    discovered = [script("deploy", "./scripts/deploy.sh")]
    assert [o.display for o in merge_options(declared, discovered, PREFIXES)] == ["deploy", "deploy"]

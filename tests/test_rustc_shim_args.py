from rustc_shim_args import always, count_containing, find_option, find_option_matching, has_debuginfo_option


def test_first_match_wins():
    assert find_option(["--a=1", "--a=2"], "--a", always) == "1"


def test_space_separated_value():
    assert find_option(["--a", "1"], "--a", always) == "1"


def test_trailing_option_without_value_is_absent():
    assert find_option(["--a"], "--a", always) is None
    assert find_option(["x", "--a"], "--a") is None


def test_missing_option_is_absent():
    assert find_option(["--b=1", "c"], "--a") is None
    assert find_option([], "--a") is None


def test_name_must_match_exactly():
    assert find_option(["--ab=1", "--a-b", "2"], "--a") is None
    assert find_option(["-a=1"], "--a") is None


def test_predicate_rejection_keeps_scanning():
    got = find_option(["--a=x", "--a", "y", "--a=3"], "--a", lambda v: v.isdigit())
    assert got == "3"


def test_consumed_value_is_not_rescanned_as_name():
    # "--a" after the first "--a" is its value, not a second occurrence.
    assert find_option(["--a", "--a", "2"], "--a", always) == "--a"
    assert find_option(["--a", "--a", "2"], "--a", lambda v: v == "2") is None


def test_value_keeps_later_equals_signs():
    assert find_option(["--cfg=feature=\"x\""], "--cfg") == "feature=\"x\""


def test_empty_value_after_equals_is_a_value():
    assert find_option(["--sysroot="], "--sysroot") == ""


def test_debuginfo_option_forms():
    assert has_debuginfo_option(["-C", "debuginfo=2"])
    assert has_debuginfo_option(["-Cdebuginfo=2"])
    assert has_debuginfo_option(["debuginfo", "2"])


def test_debuginfo_in_other_option_values_is_ignored():
    assert not has_debuginfo_option(["--out-dir=/x/debuginfo"])
    assert not has_debuginfo_option(["--out-dir", "/x/debuginfo"])
    assert not has_debuginfo_option(["--crate-name", "debuginfo_utils"])


def test_bare_debuginfo_without_value_is_not_a_match():
    assert not has_debuginfo_option(["-C", "debuginfo"])


def test_matching_scan_consumes_values():
    # "--b" is the (rejected) value of --a, never a name of its own
    assert find_option_matching(["--a", "--b", "x"], lambda h: h in {"--a", "--b"}, lambda v: v == "x") is None
    assert find_option_matching(["--x-a=1", "--y-a=2"], lambda h: h.endswith("-a"), lambda v: v == "2") == "2"


def test_count_containing():
    assert count_containing(["cita-a", "b", "/w/cita/target", "xcitax"], "cita") == 3
    assert count_containing([], "cita") == 0

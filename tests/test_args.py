from uwlib.args import parse_kvargs


def test_sample_argv():
    argv = ["/bin/sh", "foo=bar", "one=1", "two", "three", "four=4"]
    args = parse_kvargs(argv)
    assert len(args) == 6
    assert args.item(0) == (0, "/bin/sh")
    assert args.item(1) == ("foo", "bar")
    assert args.item(2) == ("one", "1")
    assert args.item(3) == ("two", None)
    assert args.item(4) == ("three", None)
    assert args.item(5) == ("four", "4")


def test_empty_argv():
    assert len(parse_kvargs([])) == 0


def test_split_at_first_equals():
    args = parse_kvargs(["prog", "k=v=w"])
    assert args["k"] == "v=w"


def test_duplicate_overwrites_in_place():
    args = parse_kvargs(["prog", "a=1", "b=2", "a=3"])
    assert list(args.items()) == [(0, "prog"), ("a", "3"), ("b", "2")]


def test_empty_value_is_string():
    args = parse_kvargs(["prog", "a="])
    assert args["a"] == ""
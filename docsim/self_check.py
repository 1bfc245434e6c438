import sys

from docsim.similarity import compare

SOURCE_DOC = (
    "今天是星期天，天气晴，今天晚上我要去看电影。"
    "The weather is sunny today and tonight I am going to the cinema."
)
TARGET_DOC = (
    "今天是周天，天气晴朗，我晚上要去看电影。"
    "The weather is sunny today, and tonight I will go to the cinema!"
)
DOC_1 = "Hashing maps tokens to fixed width integers so documents can be compared quickly."
DOC_2 = "雨后的山林里，小鸟在枝头歌唱，溪水缓缓流过石桥。"

# (name, text_a, text_b)
SELF_CHECK_CASES = (
    ("source vs target", SOURCE_DOC, TARGET_DOC),
    ("unrelated documents", DOC_1, DOC_2),
    ("empty documents", "", ""),
)


def run_self_check(cases: tuple[tuple[str, str, str], ...] = SELF_CHECK_CASES) -> int:
    # run every case even if one fails, returns the number of failures
    print("Running self check...\n")
    failures = 0
    for i, (name, text_a, text_b) in enumerate(cases):
        print(f"[{i + 1}/{len(cases)}] {name}")
        try:
            result = compare(text_a, text_b)
        except Exception as e:
            failures += 1
            print(f"\tCase {i + 1} failed: {e}", file=sys.stderr)
        else:
            print(f"\tSimilarity: {result.percentage} ({result.verdict.label})")
        print("-" * 30)

    print(f"Self check finished, {failures} failure(s)")
    return failures

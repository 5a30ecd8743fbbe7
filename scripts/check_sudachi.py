import asyncio
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root / "src"))
from main import create_responder

sentences = [
    "ラーメンを食べたい",
    "もう学校に行きたくない",
    "今日は勉強したいな",
    "週末は何もしたくない",
    "明日は雨らしい",
]


async def main() -> None:
    # Initialize (loads dicts, might take time)
    print("Initializing responder...")
    responder = create_responder()
    if not await responder.warm_up():
        return

    print("Checking Sudachi Tokenization:")
    for s in sentences:
        analysis = await responder.analyze(s)
        print(f"Text: {s}")
        print(f"  Tokens: {[(t.surface, t.base_form, str(t.pos), t.pos_detail) for t in analysis.tokens]}")
        print(f"  Desire: {analysis.signal}")
        print(f"  Verb: {analysis.verb!r} ({analysis.conjugation_class})")
        print(f"  Reply: {analysis.reply}")
        print("-" * 20)


if __name__ == "__main__":
    asyncio.run(main())

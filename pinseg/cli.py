"""
pinseg 命令行工具
"""

import argparse
import sys

import orjson

# 演示用例
DEMO_SAMPLES = [
    "huangzhuanga",
    "aanghahaohuang",
    "tiangaorenniaofei",
    "haineicunzhiji",
    "nichifanlema",
]

GREEN = '\033[32m'
RESET = '\033[0m'


def _cmd_split(args) -> int:
    from pinseg import PinyinSegmenter, SegmenterConfig, SegmenterError

    config = SegmenterConfig(normalize_case=not args.keep_case)
    results = []
    for text in args.pinyin:
        try:
            results.append(PinyinSegmenter(text, config).segment())
        except SegmenterError as e:
            print(f"错误: {text!r}: {e}", file=sys.stderr)
            return 2

    if args.json:
        payload = [{"pinyin": r.raw_pinyin, "tokens": r.tokens} for r in results]
        sys.stdout.write(orjson.dumps(payload).decode("utf-8") + "\n")
    else:
        for r in results:
            print(args.sep.join(r.tokens))
    return 0


def _cmd_demo(args) -> int:
    from pinseg import PinyinSegmenter

    color = sys.stdout.isatty() and not args.no_color
    for phonetic in DEMO_SAMPLES:
        result = PinyinSegmenter(phonetic).split()
        print(f"Input:{phonetic}")
        line = f"Result:{'/'.join(result)}"
        print(f"{GREEN}{line}{RESET}" if color else line)
        print()

    print("END")
    return 0


def main(argv=None):
    """命令行入口"""
    parser = argparse.ArgumentParser(
        prog="pinseg",
        description="pinseg - 拼音音节切分器",
    )

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # split 命令
    split_parser = subparsers.add_parser("split", help="切分拼音")
    split_parser.add_argument("pinyin", nargs="+", help="拼音输入，可用撇号分隔")
    split_parser.add_argument("--sep", default="/", help="输出分隔符 (默认: /)")
    split_parser.add_argument("--json", action="store_true", help="以 JSON 输出")
    split_parser.add_argument("--keep-case", action="store_true", help="不转小写")

    # demo 命令
    demo_parser = subparsers.add_parser("demo", help="运行演示用例")
    demo_parser.add_argument("--no-color", action="store_true", help="关闭彩色输出")

    # server 命令
    server_parser = subparsers.add_parser("server", help="启动 API 服务")
    server_parser.add_argument("--host", default="0.0.0.0", help="绑定地址 (默认: 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=3000, help="端口 (默认: 3000)")

    # version 命令
    subparsers.add_parser("version", help="显示版本")

    args = parser.parse_args(argv)

    if args.command == "split":
        return _cmd_split(args)

    elif args.command == "demo":
        return _cmd_demo(args)

    elif args.command == "server":
        from pinseg.api.server import main as server_main
        import os
        os.environ["HOST"] = args.host
        os.environ["PORT"] = str(args.port)
        server_main()
        return 0

    elif args.command == "version":
        from pinseg import __version__
        print(f"pinseg v{__version__}")
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())

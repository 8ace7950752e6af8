#!/usr/bin/env python3
"""
测试运行脚本：运行所有测试并生成报告。
"""
import sys
import unittest
from pathlib import Path
from datetime import datetime
from io import StringIO

import orjson


def run_all_tests(verbose: int = 2):
    """运行所有测试."""
    test_dir = Path(__file__).parent

    loader = unittest.TestLoader()
    suite = loader.discover(str(test_dir), pattern='test_*.py', top_level_dir=str(test_dir.parent))

    stream = StringIO()
    runner = unittest.TextTestRunner(stream=stream, verbosity=verbose)
    result = runner.run(suite)

    print(stream.getvalue())

    passed = result.testsRun - len(result.failures) - len(result.errors)
    report = {
        'timestamp': datetime.now().isoformat(),
        'tests_run': result.testsRun,
        'successes': passed,
        'failures': len(result.failures),
        'errors': len(result.errors),
        'skipped': len(result.skipped),
        'success_rate': passed / result.testsRun * 100 if result.testsRun > 0 else 0,
    }

    if result.failures:
        report['failure_details'] = [
            {'test': str(test), 'traceback': traceback}
            for test, traceback in result.failures
        ]

    if result.errors:
        report['error_details'] = [
            {'test': str(test), 'traceback': traceback}
            for test, traceback in result.errors
        ]

    return result, report


def main():
    """主函数."""
    print("=" * 70)
    print("🧪 运行测试套件")
    print("=" * 70)
    print()

    result, report = run_all_tests(verbose=2)

    print()
    print("=" * 70)
    print("📊 测试总结")
    print("=" * 70)
    print(f"总测试数: {report['tests_run']}")
    print(f"成功: {report['successes']}")
    print(f"失败: {report['failures']}")
    print(f"错误: {report['errors']}")
    print(f"跳过: {report['skipped']}")
    print(f"成功率: {report['success_rate']:.1f}%")
    print("=" * 70)

    report_file = Path(__file__).parent / 'test_report.json'
    report_file.write_bytes(orjson.dumps(report, option=orjson.OPT_INDENT_2))

    print(f"\n✅ 测试报告已保存到: {report_file}")

    return 0 if result.wasSuccessful() else 1


if __name__ == '__main__':
    sys.exit(main())

import argparse
import asyncio
import json
import sys
from typing import List, Optional

import httpx

from .config import KDEConfig
from .errors import KDEError, get_error_message
from .models import SEARCH_TYPES, FileInfo, SearchOptions
from .sdk import initialize_kde
from .utils import format_bytes


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='kde')
    # unset flags fall back to KDE_* variables, see config_from_args
    p.add_argument('--base-url')
    p.add_argument('--cookie')
    p.add_argument('--timeout', type=float)
    sub = p.add_subparsers(dest='cmd', required=True)

    ls = sub.add_parser('ls')
    ls.add_argument('path')
    ls.add_argument('--json', action='store_true')

    cat = sub.add_parser('cat')
    cat.add_argument('path')
    cat.add_argument('--out')

    write = sub.add_parser('write')
    write.add_argument('path')
    source = write.add_mutually_exclusive_group(required=True)
    source.add_argument('--text')
    source.add_argument('--from', dest='from_file')

    rm = sub.add_parser('rm')
    rm.add_argument('path')

    cp = sub.add_parser('cp')
    cp.add_argument('source')
    cp.add_argument('destination')

    mv = sub.add_parser('mv')
    mv.add_argument('source')
    mv.add_argument('destination')

    mkdir = sub.add_parser('mkdir')
    mkdir.add_argument('path')

    stat = sub.add_parser('stat')
    stat.add_argument('path')
    stat.add_argument('--json', action='store_true')

    find = sub.add_parser('find')
    find.add_argument('query')
    find.add_argument('--recursive', action='store_true', default=None)
    find.add_argument('--pattern')
    find.add_argument('--type', choices=SEARCH_TYPES)
    find.add_argument('--json', action='store_true')

    upload = sub.add_parser('upload')
    upload.add_argument('local')
    upload.add_argument('path')

    url = sub.add_parser('url')
    url.add_argument('path')

    return p


def _print_items(items: List[FileInfo], as_json: bool) -> None:
    if as_json:
        print(json.dumps([item.to_dict() for item in items], indent=2))
        return
    for item in items:
        kind = 'd' if item.is_directory else '-'
        print(f"{kind}\t{format_bytes(item.size)}\t{item.path}")


def config_from_args(args: argparse.Namespace) -> KDEConfig:
    return KDEConfig.from_env(
        base_url=args.base_url,
        auth_cookie=args.cookie,
        default_timeout=args.timeout,
    )


async def run(
    args: argparse.Namespace,
    config: KDEConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    session = initialize_kde(config, transport=transport)

    async with session.vfs as vfs:
        if args.cmd == 'ls':
            _print_items(await vfs.read_directory(args.path), args.json)
            return 0

        if args.cmd == 'cat':
            data = await vfs.read_file(args.path)
            if args.out:
                with open(args.out, 'wb') as handle:
                    handle.write(data)
            else:
                sys.stdout.buffer.write(data)
                sys.stdout.flush()
            return 0

        if args.cmd == 'write':
            if args.from_file:
                with open(args.from_file, 'rb') as handle:
                    content = handle.read()
            else:
                content = args.text
            await vfs.write_file(args.path, content)
            print('OK')
            return 0

        if args.cmd == 'rm':
            await vfs.delete_file(args.path)
            print('OK')
            return 0

        if args.cmd == 'cp':
            await vfs.copy_file(args.source, args.destination)
            print('OK')
            return 0

        if args.cmd == 'mv':
            await vfs.move_file(args.source, args.destination)
            print('OK')
            return 0

        if args.cmd == 'mkdir':
            await vfs.create_directory(args.path)
            print('OK')
            return 0

        if args.cmd == 'stat':
            info = await vfs.get_file_info(args.path)
            if args.json:
                print(json.dumps(info.to_dict(), indent=2))
            else:
                print(f"{info.path}\t{info.mime or '-'}\t{format_bytes(info.size)}")
            return 0

        if args.cmd == 'find':
            options = SearchOptions(recursive=args.recursive, pattern=args.pattern, type=args.type)
            _print_items(await vfs.search_files(args.query, options), args.json)
            return 0

        if args.cmd == 'upload':
            with open(args.local, 'rb') as handle:
                await vfs.upload_file(args.path, handle)
            print('OK')
            return 0

        if args.cmd == 'url':
            print(await vfs.download_file(args.path))
            return 0

    return 1


def main(argv: Optional[List[str]] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args)
        return asyncio.run(run(args, config, transport=transport))
    except KDEError as exc:
        raise SystemExit(get_error_message(exc)) from exc


if __name__ == '__main__':
    raise SystemExit(main())

"""Command-line interface for scrivener."""


import argparse
import logging
import sys
from scrivener.api import Scrivener
from scrivener.display import notes_table
from scrivener.errors import Error


def _empty_index_message(program_name: str) -> str:
    return (f'There are no notes to list!\n'
            f"Create one with '{program_name} new <name>'\n"
            f"Try '{program_name} --help' for more options.")


def _new(args, sc: Scrivener) -> int:
    note = sc.new(args.name, args.path, args.tags, args.template[0] if args.template else None)
    print(f'Note `{note.name}` at {note.path} created successfully.')
    return 0


def _add(args, sc: Scrivener) -> int:
    note = sc.add(args.name, args.path, args.tags)
    print(f'Note `{note.name}` at {note.path} added successfully.')
    return 0


def _edit(args, sc: Scrivener) -> int:
    sc.edit(args.name)
    print(f'Note `{args.name}` has been edited successfully.')
    return 0


def _remove(args, sc: Scrivener) -> int:
    sc.remove(args.name)
    print(f'Note `{args.name}` has been removed successfully.')
    return 0


def _delete(args, sc: Scrivener) -> int:
    sc.delete(args.name)
    print(f'Note `{args.name}` has been deleted successfully.')
    return 0


def _list(args, sc: Scrivener) -> int:
    if not sc.index:
        print(_empty_index_message(sc.conf.program_name))
    else:
        print(notes_table(sc.index.notes(), show_paths=args.paths, show_tags=args.tags))
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='scrivener',
        description='Keeps track of plaintext note files by name. The index of notes is stored in '
                    '~/.config/scrivener/scrivener.yml unless configured otherwise in ~/.scrivener.conf.py.')
    parser.set_defaults(func=None)
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debugging details to stderr.')

    subs = parser.add_subparsers(title='Commands')

    p_new = subs.add_parser(
        'new',
        help='Create a new file and open it in your text editor, then add it as a note. '
             'Uses $VISUAL or $EDITOR if set, and vi otherwise.')
    p_new.add_argument('name', help='A unique name to associate with the note.')
    p_new.add_argument('path', nargs='?',
                       help='Where to create the file. Defaults to NAME.txt in the current directory. '
                            'The file must not exist yet.')
    p_new.add_argument('-t', '--tags', nargs='+', help='Tags to attach to the note.')
    p_new.add_argument('-T', '--template', nargs=1,
                       help='Name or path of a Mako template for the initial text. Names are looked up in the '
                            'template_globs from your ~/.scrivener.conf.py file.')
    p_new.set_defaults(func=_new)

    p_add = subs.add_parser('add', help='Add an existing plaintext file to the index of notes.')
    p_add.add_argument('name', help='A unique name to associate with the note.')
    p_add.add_argument('path', help='The file to add.')
    p_add.add_argument('-t', '--tags', nargs='+', help='Tags to attach to the note.')
    p_add.set_defaults(func=_add)

    p_edit = subs.add_parser('edit', help='Open an existing note in your text editor.')
    p_edit.add_argument('name', help='The name of the note to edit.')
    p_edit.set_defaults(func=_edit)

    p_remove = subs.add_parser('remove', help='Remove a note from the index without deleting its file.')
    p_remove.add_argument('name', help='The name of the note to remove.')
    p_remove.set_defaults(func=_remove)

    p_delete = subs.add_parser('delete', help='Remove a note from the index and delete its file.')
    p_delete.add_argument('name', help='The name of the note to delete.')
    p_delete.set_defaults(func=_delete)

    p_list = subs.add_parser('list', help='List all notes.')
    p_list.add_argument('-p', '--paths', action='store_true', help="Show each note file's path.")
    p_list.add_argument('-t', '--tags', action='store_true', help="Show each note's tags.")
    p_list.set_defaults(func=_list)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    if not args.func:
        parser.print_help()
        return 1
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')
    try:
        with Scrivener.for_user() as sc:
            return args.func(args, sc)
    except Error as e:
        print(f'error: {e.message}', file=sys.stderr)
        return 1

#!/usr/bin/env python3

import argparse
import logging
import yaml
from ffstudiolib.core import utils
from ffstudiolib.core.project import FfstudioProject

#============================================

def parse_args(argv: list = None):
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(description="ffmpeg watermark command and batch script builder")
	parser.add_argument('-y', '--yaml', dest='yamlfile', required=True,
		help='project yaml file with watermark, trim, speed, frame and batch settings')
	parser.add_argument('-d', '--dialect', dest='dialect', default='windows',
		choices=('windows', 'bash'),
		help='batch script dialect')
	parser.add_argument('-o', '--output', dest='output_file',
		help='write the result to this file instead of stdout')
	parser.add_argument('-w', '--write', dest='write_default', action='store_true',
		help='write the result next to the yaml file using the default name')
	parser.add_argument('-b', '--batch', dest='batch', action='store_true',
		help='force batch mode')
	parser.add_argument('-B', '--single', dest='batch', action='store_false',
		help='force single file mode')
	parser.add_argument('-s', '--strict', dest='strict', action='store_true',
		help='reject unknown or malformed settings instead of falling back')
	parser.add_argument('-p', '--dump-plan', dest='dump_plan', action='store_true',
		help='print the compiled filter stages')
	parser.add_argument('-q', '--quiet', dest='quiet', action='store_true',
		help='only print the compiled text')
	parser.add_argument('-v', '--verbose', dest='verbose', action='store_true',
		help='show debug logging')
	parser.set_defaults(batch=None)
	args = parser.parse_args(argv)
	return args

#============================================

def main(argv: list = None):
	args = parse_args(argv)
	level = logging.DEBUG if args.verbose else logging.WARNING
	logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
	utils.set_quiet_mode(args.quiet)
	project = FfstudioProject(args.yamlfile, dialect=args.dialect,
		strict=args.strict, batch_override=args.batch)
	if args.dump_plan:
		plan = project.plan()
		print(yaml.safe_dump(plan, sort_keys=False))
		return
	if args.output_file or args.write_default:
		output_file = project.save(args.output_file)
		utils.report(f"wrote {output_file}")
		return
	print(project.compile())


if __name__ == '__main__':
	main()

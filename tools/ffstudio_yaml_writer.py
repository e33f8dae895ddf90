#!/usr/bin/env python3

"""
ffstudio_yaml_writer.py

Write a starter ffstudio project YAML from command-line arguments.
"""

# Standard Library
import argparse
import os

#============================================

def yaml_quote(value: str) -> str:
	"""
	Quote a string for YAML output.

	Args:
		value: Raw string.

	Returns:
		str: YAML-quoted string.
	"""
	escaped = value.replace("\\", "\\\\").replace('"', '\\"')
	return f"\"{escaped}\""

#============================================

def format_value(value: float) -> str:
	"""
	Format a number for YAML output.

	Args:
		value: Numeric value.

	Returns:
		str: Formatted number string.
	"""
	text = f"{float(value):.3f}"
	text = text.rstrip('0').rstrip('.')
	if text in ("", "-0"):
		text = "0"
	return text

#============================================

def build_project_yaml(video_file: str = None, watermark_file: str = None,
	opacity: float = 0.8, x: int = 50, y: int = 50, scale: float = 0.5,
	start: str = None, end: str = None, speed: float = 1.0,
	audio_mode: str = 'original', aspect_ratio: str = 'original',
	resolution: str = 'original', batch: bool = False, input_dir: str = '.',
	output_dir: str = 'processed', extension: str = 'mp4') -> str:
	"""
	Build ffstudio project YAML text.

	Args:
		video_file: Single-mode source file name.
		watermark_file: Watermark image file name.
		start: Trim start, seconds or timecode.
		end: Trim end, seconds or timecode.
		batch: Whether batch mode is enabled.

	Returns:
		str: YAML content.
	"""
	lines = []
	lines.append("ffstudio: 1")
	lines.append("")
	if video_file is not None:
		lines.append("source:")
		lines.append(f"  file: {yaml_quote(video_file)}")
		lines.append("")
	lines.append("watermark:")
	if watermark_file is not None:
		lines.append(f"  file: {yaml_quote(watermark_file)}")
	lines.append(f"  opacity: {format_value(opacity)}")
	lines.append(f"  x: {int(x)}")
	lines.append(f"  y: {int(y)}")
	lines.append(f"  scale: {format_value(scale)}")
	if start is not None or end is not None:
		lines.append("")
		lines.append("trim:")
		if start is not None:
			lines.append(f"  start: {yaml_quote(str(start))}")
		if end is not None:
			lines.append(f"  end: {yaml_quote(str(end))}")
	lines.append("")
	lines.append("speed:")
	lines.append(f"  video: {format_value(speed)}")
	lines.append(f"  audio: {audio_mode}")
	lines.append("")
	lines.append("frame:")
	lines.append(f"  aspect_ratio: {yaml_quote(aspect_ratio)}")
	lines.append(f"  resolution: {resolution}")
	lines.append("")
	lines.append("batch:")
	lines.append(f"  enabled: {'true' if batch else 'false'}")
	lines.append(f"  input_dir: {yaml_quote(input_dir)}")
	lines.append(f"  output_dir: {yaml_quote(output_dir)}")
	lines.append(f"  extension: {extension.lstrip('.')}")
	lines.append("")
	return "\n".join(lines)

#============================================

def parse_args():
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(description="Write a starter ffstudio project yaml")
	parser.add_argument('-o', '--output', dest='output_file', required=True,
		help='project yaml file to write')
	parser.add_argument('-i', '--input', dest='video_file',
		help='source video for single file mode')
	parser.add_argument('-w', '--watermark', dest='watermark_file',
		help='watermark image file')
	parser.add_argument('--opacity', dest='opacity', type=float, default=0.8)
	parser.add_argument('-x', dest='x', type=int, default=50)
	parser.add_argument('-y', dest='y', type=int, default=50)
	parser.add_argument('--scale', dest='scale', type=float, default=0.5)
	parser.add_argument('--start', dest='start')
	parser.add_argument('--end', dest='end')
	parser.add_argument('-s', '--speed', dest='speed', type=float, default=1.0)
	parser.add_argument('--sync-audio', dest='audio_mode', action='store_const',
		const='sync', default='original', help='retime audio to match speed')
	parser.add_argument('-a', '--aspect', dest='aspect_ratio', default='original',
		choices=('original', '16:9', '9:16', '1:1', '4:3'))
	parser.add_argument('-r', '--resolution', dest='resolution', default='original',
		choices=('original', '1080p', '720p', '480p'))
	parser.add_argument('-b', '--batch', dest='batch', action='store_true',
		help='enable batch folder mode')
	parser.add_argument('--input-dir', dest='input_dir', default='.')
	parser.add_argument('--output-dir', dest='output_dir', default='processed')
	parser.add_argument('-e', '--extension', dest='extension', default='mp4')
	parser.add_argument('-f', '--force', dest='force', action='store_true',
		help='overwrite an existing yaml file')
	args = parser.parse_args()
	return args

#============================================

def main():
	args = parse_args()
	if os.path.exists(args.output_file) and not args.force:
		raise RuntimeError(f"{args.output_file} exists, use --force to overwrite")
	yaml_text = build_project_yaml(video_file=args.video_file,
		watermark_file=args.watermark_file, opacity=args.opacity, x=args.x,
		y=args.y, scale=args.scale, start=args.start, end=args.end,
		speed=args.speed, audio_mode=args.audio_mode,
		aspect_ratio=args.aspect_ratio, resolution=args.resolution,
		batch=args.batch, input_dir=args.input_dir, output_dir=args.output_dir,
		extension=args.extension)
	with open(args.output_file, 'w', encoding='utf-8') as handle:
		handle.write(yaml_text)
	print(f"wrote {args.output_file}")

#============================================

if __name__ == '__main__':
	main()

#!/usr/bin/env python
"""
mandelbrot_cli.py

Render a view of the Mandelbrot set to an image file.

Two presets mirror the two ways the explorer uses the engine:

    preview  1600x1000,  1024 iterations   (what the window shows)
    export   5760x3240,  4096 iterations   (the high resolution save)

Any preset value can be overridden from the command line. Export without
--out names the file after the view:

    mandelbrot_(-7.500e-1, 0.000e0)_5.000e0.png
"""

import argparse
import time

import numba

import mandel
import config
import mandelbrot
import raster


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        "mandelbrot-cli",
        description=(
            "Chunked parallel escape-time renderer for the Mandelbrot set.\n"
            "The view is a center point, the real-axis span and a pixel size."
        ),
    )

    p.add_argument(
        "--preset",
        choices=sorted(config.VIEW_PRESETS),
        default=config.DEFAULT_PRESET,
        help="Size and iteration budget to start from.",
    )
    p.add_argument(
        "--center",
        type=float,
        nargs=2,
        metavar=("RE", "IM"),
        default=(mandel.DEFAULT_CENTER.real, mandel.DEFAULT_CENTER.imag),
        help="View center in the complex plane.",
    )
    p.add_argument(
        "--width",
        type=float,
        default=mandel.DEFAULT_WIDTH,
        help="Span of the real axis across the image.",
    )
    p.add_argument(
        "--pix",
        type=int,
        nargs=2,
        metavar=("W", "H"),
        default=None,
        help="Image width/height in pixels (overrides preset).",
    )
    p.add_argument(
        "--iter",
        type=int,
        default=None,
        help=f"Iteration budget, at most {mandel.MAX_ITER_LIMIT} (overrides preset).",
    )
    p.add_argument(
        "--chunk",
        type=int,
        nargs=2,
        metavar=("W", "H"),
        default=None,
        help="Chunk width/height in pixels (overrides preset).",
    )
    p.add_argument(
        "--threads",
        type=int,
        default=None,
        help="Worker threads (default: all cores).",
    )
    p.add_argument(
        "--out",
        type=str,
        default=None,
        help="Output path. Default: mandelbrot.<ext>, or a name built from the view for export.",
    )
    p.add_argument(
        "--ext",
        type=str,
        default=mandel.DEFAULT_EXT,
        help="Image format used for default output names.",
    )
    return p


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    if args.threads is not None:
        if args.threads <= 0:
            raise SystemExit(f"--threads must be positive, got {args.threads}")
        numba.set_num_threads(min(args.threads, numba.config.NUMBA_NUM_THREADS))

    pix = args.pix or (None, None)
    chunk = args.chunk or (None, None)
    try:
        request = config.make_request(
            args.preset,
            center=complex(*args.center),
            plane_width=args.width,
            image_width_px=pix[0],
            image_height_px=pix[1],
            chunk_width_px=chunk[0],
            chunk_height_px=chunk[1],
            max_iterations=args.iter,
        )
    except mandel.InvalidRequest as e:
        raise SystemExit(f"invalid view: {e}")

    if args.out is not None:
        outfile = args.out
    elif args.preset == "export":
        outfile = raster.export_filename(request.center, request.plane_width, args.ext)
    else:
        outfile = f"mandelbrot.{args.ext.lstrip('.')}"
    print(f"will save to {outfile}")

    if args.preset == "export":
        print("Generating high res image")
    t0 = time.perf_counter()
    rgb = mandelbrot.render(request)
    print(
        f"field time: {time.perf_counter() - t0:.3f}s "
        f"({request.image_width_px}x{request.image_height_px}, "
        f"iter {request.max_iterations}, threads {numba.get_num_threads()})"
    )

    raster.save_rgb(rgb, outfile)
    if args.preset == "export":
        print("High res image saved!")
    print(f"saved: {outfile}")


if __name__ == "__main__":
    main()

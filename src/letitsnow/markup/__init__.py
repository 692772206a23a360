from letitsnow.markup.fragment import build_fragment as build_fragment
from letitsnow.markup.fragment import format_pixels as format_pixels
from letitsnow.markup.patcher import FragmentPatcher as FragmentPatcher
from letitsnow.markup.patcher import PatchResult as PatchResult

"""
Nepali Unicode Converter
Converts text typed in the Preeti or Hisab legacy fonts to Unicode Devanagari,
or from one legacy font's keystrokes to the other's.
Serves a small web page and JSON API, and works from the command line.
"""

import os
import re
from enum import Enum
from typing import Dict, Optional, Tuple

# Load .env file for local development (ignored on Vercel where env vars are set in dashboard)
try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass

from font_swap import hisab_to_preeti, preeti_to_hisab
from legacy_converter import hisab_to_unicode, preeti_to_unicode

# Optional dependencies
try:
    from flask import Flask, render_template, request, jsonify
    HAS_FLASK = True
except ImportError:
    HAS_FLASK = False

# Configuration from environment variables
DEFAULT_INPUT_FONT = os.getenv('DEFAULT_INPUT_FONT', 'preeti')
DEFAULT_OUTPUT_FONT = os.getenv('DEFAULT_OUTPUT_FONT', 'unicode')
MAX_INPUT_LENGTH = int(os.getenv('MAX_INPUT_LENGTH', '100000'))

# Closing tags and tags with attributes only; Preeti types ? as < and श्र as >,
# so a bare <a> is text
HTML_TAG_RE = re.compile(
    r"</[A-Za-z][A-Za-z0-9-]*\s*>"
    r"|<[A-Za-z][A-Za-z0-9-]*(?:\s+[A-Za-z_:][-\w:.]*\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s\"'<>]+))+\s*/?>"
)


class Font(Enum):
    """Fonts text can be typed in"""
    PREETI = 'preeti'
    HISAB = 'hisab'


class OutputFont(Enum):
    """Representations text can be converted to"""
    PREETI = 'preeti'
    HISAB = 'hisab'
    UNICODE = 'unicode'


FONT_LABELS = {
    'preeti': 'Preeti',
    'hisab': 'Hisab',
    'unicode': 'Unicode',
}

# (input font, output font) -> converter
DISPATCH = {
    (Font.PREETI, OutputFont.UNICODE): preeti_to_unicode,
    (Font.PREETI, OutputFont.HISAB): preeti_to_hisab,
    (Font.HISAB, OutputFont.UNICODE): hisab_to_unicode,
    (Font.HISAB, OutputFont.PREETI): hisab_to_preeti,
}


class InvalidRequest(ValueError):
    """Request payload the converter cannot act on"""


class InvalidFontSelection(InvalidRequest):
    """Input or output font is not one the converter supports"""


class InputTooLarge(ValueError):
    """Input text is longer than the configured limit"""


def parse_input_font(value) -> Font:
    try:
        return Font(str(value).strip().lower())
    except ValueError:
        raise InvalidFontSelection(f"Invalid input font: {value!r}") from None


def parse_output_font(value) -> OutputFont:
    try:
        return OutputFont(str(value).strip().lower())
    except ValueError:
        raise InvalidFontSelection(f"Invalid output font: {value!r}") from None


def strip_tags(text: str) -> str:
    """Remove HTML tags pasted along with the text"""
    return HTML_TAG_RE.sub('', text)


class UnicodeConverterService:
    """
    Validates font selections and dispatches to the right converter
    """

    def __init__(self, default_input_font: str = 'preeti', default_output_font: str = 'unicode',
                 max_input_length: int = 100000):
        """
        Initialize service

        Args:
            default_input_font: Font used when a request does not name one
            default_output_font: Output used when a request does not name one
            max_input_length: Longest text accepted, in characters
        """
        self.default_input_font = parse_input_font(default_input_font)
        self.default_output_font = parse_output_font(default_output_font)
        self.max_input_length = max_input_length

    def resolve_fonts(self, input_font: Optional[str] = None,
                      output_font: Optional[str] = None) -> Tuple[Font, OutputFont]:
        """Parse the requested fonts, falling back to the configured defaults"""
        source = parse_input_font(input_font) if input_font else self.default_input_font
        target = parse_output_font(output_font) if output_font else self.default_output_font
        return source, target

    def convert(self, text: str, input_font: Optional[str] = None,
                output_font: Optional[str] = None) -> str:
        """
        Convert text between fonts

        Args:
            text: Text typed in the input font
            input_font: 'preeti' or 'hisab'
            output_font: 'preeti', 'hisab' or 'unicode'

        Returns:
            Converted text; unchanged when input and output fonts are the same.
            Pasted HTML markup is dropped before a real conversion

        Raises:
            InvalidFontSelection: if either font is not supported
            InputTooLarge: if the text exceeds max_input_length
        """
        source, target = self.resolve_fonts(input_font, output_font)

        text = text or ''
        if len(text) > self.max_input_length:
            raise InputTooLarge(f"Input is longer than {self.max_input_length} characters")

        if source.value == target.value:
            return text
        return DISPATCH[(source, target)](strip_tags(text))

    def font_options(self) -> Dict[str, str]:
        """Selectable output fonts and their display names"""
        return dict(FONT_LABELS)

    def handle(self, data: Dict) -> Dict:
        """Convert a request payload into a JSON-ready result"""
        text = data.get('input_text', '')
        if not isinstance(text, str):
            raise InvalidRequest('input_text must be a string')

        source, target = self.resolve_fonts(data.get('input_font'), data.get('output_font'))
        result = self.convert(text, source.value, target.value)
        return {
            'success': True,
            'result': result,
            'input_font': source.value,
            'output_font': target.value,
        }


# Initialize service
service = UnicodeConverterService(DEFAULT_INPUT_FONT, DEFAULT_OUTPUT_FONT, MAX_INPUT_LENGTH)

# Initialize Flask app only if available
if HAS_FLASK:
    app = Flask(__name__)

    def _cors(response):
        response.headers.add('Access-Control-Allow-Origin', '*')
        return response

    def _preflight(methods: str):
        response = jsonify({'status': 'ok'})
        response.headers.add('Access-Control-Allow-Headers', 'Content-Type')
        response.headers.add('Access-Control-Allow-Methods', methods)
        return _cors(response)

    def _request_data() -> Dict:
        """Read the payload from JSON, form fields, or a raw text body"""
        data = request.get_json(force=True, silent=True)
        if isinstance(data, dict):
            return data

        data = request.form.to_dict()
        if not data:
            body = request.get_data(as_text=True)
            data = {'input_text': body} if body else {}

        return data

    @app.route('/', methods=['GET'])
    def index():
        return render_template(
            'unicode_converter.html',
            font_options=service.font_options(),
            default_input_font=service.default_input_font.value,
            default_output_font=service.default_output_font.value,
        )

    @app.route('/api/convert', methods=['POST', 'OPTIONS'])
    def api_convert():
        """API endpoint for conversion"""
        if request.method == 'OPTIONS':
            return _preflight('POST')

        data = _request_data()

        try:
            return _cors(jsonify(service.handle(data)))
        except InvalidRequest as e:
            return _cors(jsonify({'success': False, 'error': str(e)})), 400
        except InputTooLarge as e:
            return _cors(jsonify({'success': False, 'error': str(e)})), 413
        except Exception as e:
            app.logger.exception('Conversion failed')
            return _cors(jsonify({
                'success': False,
                'error': f'Converter error: {str(e)}'
            })), 500

    @app.route('/api/fonts', methods=['GET'])
    def api_fonts():
        """Font options and configured defaults"""
        return _cors(jsonify({
            'fonts': service.font_options(),
            'input_fonts': [font.value for font in Font],
            'default_input_font': service.default_input_font.value,
            'default_output_font': service.default_output_font.value,
        }))

    @app.route('/api/health', methods=['GET'])
    def api_health():
        return _cors(jsonify({'status': 'ok'}))

if __name__ == '__main__':
    import sys

    if len(sys.argv) > 1:
        # CLI mode
        text = sys.argv[1]
        input_font = sys.argv[2] if len(sys.argv) > 2 else None
        output_font = sys.argv[3] if len(sys.argv) > 3 else None

        try:
            print(service.convert(text, input_font, output_font))
        except (InvalidFontSelection, InputTooLarge) as e:
            print(f"Error: {e}")
            print("Usage: python unicode_converter.py <text> [preeti|hisab] [unicode|preeti|hisab]")
            sys.exit(1)
        sys.exit(0)
    else:
        # Server mode
        if not HAS_FLASK:
            print("Error: Flask is not installed. Install with: pip install flask")
            print("For CLI usage, provide text as argument: python unicode_converter.py <text>")
            sys.exit(1)

        port = int(os.environ.get("PORT", 5000))
        print(f"Default conversion: {service.default_input_font.value} -> {service.default_output_font.value}")
        app.run(host='0.0.0.0', port=port, debug=True)

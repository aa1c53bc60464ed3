# -*- coding: utf-8 -*-
import sys

from date_watermark.main import main

if __name__ == "__main__":
    sys.exit(main())

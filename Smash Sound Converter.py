''' A script for converting Smash Ultimate soundlabelinfo.sli and bgm_property.bin files between their binary format and YAML '''

# Imports
import sys

# Ensure /smashsound is present and can be imported
try:
  from smashsound.Converter import main

except ImportError as e:
  print("Error: One or more required modules are missing.")
  print(f"Details: {e}")
  print("\nPlease ensure the 'smashsound' package and PyYAML are correctly installed.")
  sys.exit(1)

if __name__ == '__main__':
  sys.exit(main())

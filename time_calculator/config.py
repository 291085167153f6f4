"""
Modulo per la gestione della configurazione del calcolatore di tempi
"""
import copy
import os
import yaml
from typing import Dict, Any, Optional

from .core import FORMATS
from .services.errors import ConfigError


class Config:
    """Classe per gestire la configurazione dell'applicazione"""

    DEFAULT_CONFIG = {
        'format': 'clock',          # 'clock' (h:m:s) oppure 'csv' (h,m,s)
        'skip_invalid': False,      # salta le righe non valide invece di fermarsi
        'output_dir': './output',
        'card': {
            'width': 800,
            'height': 400,
            'title': 'Total time'
        },
        'colors': {
            'primary': [242, 101, 34],      # Arancione (header, testo del tempo)
            'background': [235, 213, 197],  # Beige (sfondo)
            'text': [255, 255, 255]         # Bianco (titolo)
        }
    }

    # Chiavi annidate unite in profondità invece di essere sostituite
    NESTED_KEYS = ('card', 'colors')

    def __init__(self, config_file: Optional[str] = None, must_exist: bool = False):
        """
        Inizializza la configurazione

        Args:
            config_file: Path al file di configurazione YAML (opzionale)
            must_exist: Se True un file mancante solleva ConfigError
                invece di lasciare i default

        Raises:
            ConfigError: se il file richiesto manca, non è leggibile o
                contiene valori non validi
        """
        # Deep copy per evitare modifiche ai default
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)
        elif config_file and must_exist:
            raise ConfigError(f"File di configurazione non trovato: {config_file}")

    def load_from_file(self, config_file: str) -> None:
        """
        Carica la configurazione da file YAML

        Args:
            config_file: Path al file di configurazione

        Raises:
            ConfigError: se il file non è leggibile o non è YAML valido
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Errore nel caricamento del file di configurazione: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError(f"Configurazione non valida in {config_file}: attesa una mappa YAML")

        for key, value in file_config.items():
            if key in self.NESTED_KEYS and isinstance(value, dict):
                if not isinstance(self.config.get(key), dict):
                    self.config[key] = {}
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value

        self.validate()

    def validate(self) -> None:
        """
        Controlla i tipi dei valori di configurazione

        Raises:
            ConfigError: al primo valore non valido
        """
        fmt = self.config.get('format')
        if not isinstance(fmt, str) or fmt not in FORMATS:
            raise ConfigError(f"Valore 'format' non valido: {fmt!r} (ammessi: {', '.join(FORMATS)})")
        if not isinstance(self.config.get('skip_invalid'), bool):
            raise ConfigError(f"Valore 'skip_invalid' non valido: {self.config.get('skip_invalid')!r}")
        if not isinstance(self.config.get('output_dir'), str):
            raise ConfigError(f"Valore 'output_dir' non valido: {self.config.get('output_dir')!r}")

        card = self.config.get('card')
        if not isinstance(card, dict):
            raise ConfigError(f"Valore 'card' non valido: attesa una mappa, trovato {card!r}")
        for key in ('width', 'height'):
            value = card.get(key)
            # bool è una sottoclasse di int
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"Valore 'card.{key}' non valido: {value!r}")
        if not isinstance(card.get('title'), str):
            raise ConfigError(f"Valore 'card.title' non valido: {card.get('title')!r}")

        colors = self.config.get('colors')
        if not isinstance(colors, dict):
            raise ConfigError(f"Valore 'colors' non valido: attesa una mappa, trovato {colors!r}")
        for name, value in colors.items():
            if (not isinstance(value, (list, tuple)) or len(value) != 3
                    or not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value)):
                raise ConfigError(f"Colore 'colors.{name}' non valido: atteso [R, G, B], trovato {value!r}")

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Merge profondo di dizionari nested

        Args:
            base: Dizionario base da aggiornare
            update: Dizionario con gli aggiornamenti
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Aggiorna la configurazione con argomenti da CLI
        Gli argomenti CLI hanno precedenza sul file di configurazione

        Args:
            args: Dizionario con gli argomenti da CLI
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Ottiene un valore di configurazione

        Args:
            key: Chiave della configurazione
            default: Valore di default se la chiave non esiste

        Returns:
            Il valore della configurazione
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """
        Ottiene tutta la configurazione

        Returns:
            Dizionario con tutta la configurazione
        """
        return self.config.copy()

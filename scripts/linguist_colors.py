# Generated by fetch_linguist.py from GitHub Linguist's languages.yml.
# Only languages with a color are included. Do not edit by hand.

SOURCE_URL = "https://raw.githubusercontent.com/github-linguist/linguist/main/lib/linguist/languages.yml"

LANGUAGES = {
    "1C Enterprise": {"color": "#814CCC", "aliases": [], "extensions": [".bsl", ".os"]},
    "2-Dimensional Array": {"color": "#38761D", "aliases": [], "extensions": [".2da"]},
    "4D": {"color": "#004289", "aliases": [], "extensions": [".4dm"]},
    "ABAP": {"color": "#E8274B", "aliases": [], "extensions": [".abap"]},
    "ABAP CDS": {"color": "#555e25", "aliases": [], "extensions": [".asddls"]},
    "ActionScript": {"color": "#882B0F", "aliases": ["actionscript 3", "actionscript3", "as3"], "extensions": [".as"]},
    "Ada": {"color": "#02f88c", "aliases": ["ada95", "ada2005"], "extensions": [".adb", ".ada", ".ads"]},
    "Adblock Filter List": {"color": "#800000", "aliases": ["ad block filters", "ad block", "adb", "adblock"], "extensions": [".txt"]},
    "Adobe Font Metrics": {"color": "#fa0f00", "aliases": ["acfm", "adobe composite font metrics", "adobe multiple font metrics", "amfm"], "extensions": [".afm"]},
    "Agda": {"color": "#315665", "aliases": [], "extensions": [".agda"]},
    "AGS Script": {"color": "#B9D9FF", "aliases": ["ags"], "extensions": [".asc", ".ash"]},
    "AIDL": {"color": "#34EB6B", "aliases": [], "extensions": [".aidl"]},
    "Aiken": {"color": "#640ff8", "aliases": [], "extensions": [".ak"]},
    "AL": {"color": "#3AA2B5", "aliases": [], "extensions": [".al"]},
    "Alloy": {"color": "#64C800", "aliases": [], "extensions": [".als"]},
    "Alpine Abuild": {"color": "#0D597F", "aliases": ["abuild", "apkbuild"], "extensions": []},
    "Altium Designer": {"color": "#A89663", "aliases": ["altium"], "extensions": [".OutJob", ".PcbDoc", ".PrjPCB", ".SchDoc"]},
    "AMPL": {"color": "#E6EFBB", "aliases": [], "extensions": [".ampl", ".mod"]},
    "AngelScript": {"color": "#C7D7DC", "aliases": [], "extensions": [".as", ".angelscript"]},
    "Answer Set Programming": {"color": "#A9CC29", "aliases": [], "extensions": [".lp"]},
    "Antlers": {"color": "#ff269e", "aliases": [], "extensions": [".antlers.html", ".antlers.php", ".antlers.xml"]},
    "ANTLR": {"color": "#9DC3FF", "aliases": [], "extensions": [".g4"]},
    "ApacheConf": {"color": "#d12127", "aliases": ["aconf", "apache"], "extensions": [".apacheconf", ".vhost"]},
    "Apex": {"color": "#1797c0", "aliases": [], "extensions": [".cls", ".apex", ".trigger"]},
    "API Blueprint": {"color": "#2ACCA8", "aliases": [], "extensions": [".apib"]},
    "APL": {"color": "#5A8164", "aliases": [], "extensions": [".apl", ".dyalog"]},
    "Apollo Guidance Computer": {"color": "#0B3D91", "aliases": [], "extensions": [".agc"]},
    "AppleScript": {"color": "#101F1F", "aliases": ["osascript"], "extensions": [".applescript", ".scpt"]},
    "Arc": {"color": "#aa2afe", "aliases": [], "extensions": [".arc"]},
    "AsciiDoc": {"color": "#73a0c5", "aliases": [], "extensions": [".asciidoc", ".adoc", ".asc"]},
    "AspectJ": {"color": "#a957b0", "aliases": [], "extensions": [".aj"]},
    "Assembly": {"color": "#6E4C13", "aliases": ["asm", "nasm"], "extensions": [".asm", ".a51", ".i", ".inc", ".nas", ".nasm", ".s"]},
    "Astro": {"color": "#ff5a03", "aliases": [], "extensions": [".astro"]},
    "Asymptote": {"color": "#ff0000", "aliases": [], "extensions": [".asy"]},
    "ATS": {"color": "#1ac620", "aliases": ["ats2"], "extensions": [".dats", ".hats", ".sats"]},
    "AutoHotkey": {"color": "#6594b9", "aliases": ["ahk"], "extensions": [".ahk", ".ahkl"]},
    "AutoIt": {"color": "#1C3552", "aliases": ["au3", "autoit3", "autoitscript"], "extensions": [".au3"]},
    "Avro IDL": {"color": "#0040FF", "aliases": [], "extensions": [".avdl"]},
    "Awk": {"color": "#c30e9b", "aliases": [], "extensions": [".awk", ".auk", ".gawk", ".mawk", ".nawk"]},
    "B4X": {"color": "#00e4ff", "aliases": ["basic for android"], "extensions": [".bas"]},
    "Ballerina": {"color": "#FF5000", "aliases": [], "extensions": [".bal"]},
    "BASIC": {"color": "#ff0000", "aliases": [], "extensions": [".bas"]},
    "Batchfile": {"color": "#C1F12E", "aliases": ["bat", "batch", "dosbatch", "winbatch"], "extensions": [".bat", ".cmd"]},
    "Beef": {"color": "#a52f4e", "aliases": [], "extensions": [".bf"]},
    "Berry": {"color": "#15A13C", "aliases": ["be"], "extensions": [".be"]},
    "BibTeX": {"color": "#778899", "aliases": [], "extensions": [".bib", ".bibtex"]},
    "Bicep": {"color": "#519aba", "aliases": [], "extensions": [".bicep", ".bicepparam"]},
    "Bikeshed": {"color": "#5562ac", "aliases": [], "extensions": [".bs"]},
    "Bison": {"color": "#6A463F", "aliases": [], "extensions": [".bison"]},
    "BitBake": {"color": "#00bce4", "aliases": [], "extensions": [".bb", ".bbappend", ".bbclass", ".inc"]},
    "Blade": {"color": "#f7523f", "aliases": [], "extensions": [".blade", ".blade.php"]},
    "BlitzBasic": {"color": "#00FFAE", "aliases": ["b3d", "blitz3d", "blitzplus", "bplus"], "extensions": [".bb", ".decls"]},
    "BlitzMax": {"color": "#cd6400", "aliases": ["bmax"], "extensions": [".bmx"]},
    "Bluespec": {"color": "#12223c", "aliases": ["bluespec bsv", "bsv"], "extensions": [".bsv"]},
    "Bluespec BH": {"color": "#12223c", "aliases": ["bh", "bluespec classic"], "extensions": [".bs"]},
    "Boo": {"color": "#d4bec1", "aliases": [], "extensions": [".boo"]},
    "Boogie": {"color": "#c80fa0", "aliases": [], "extensions": [".bpl"]},
    "BQN": {"color": "#2b7067", "aliases": [], "extensions": [".bqn"]},
    "Brainfuck": {"color": "#2F2530", "aliases": [], "extensions": [".b", ".bf"]},
    "BrighterScript": {"color": "#66AABB", "aliases": [], "extensions": [".bs"]},
    "Brightscript": {"color": "#662D91", "aliases": [], "extensions": [".brs"]},
    "Browserslist": {"color": "#ffd539", "aliases": [], "extensions": []},
    "BuildStream": {"color": "#006bff", "aliases": [], "extensions": [".bst"]},
    "C": {"color": "#555555", "aliases": [], "extensions": [".c", ".cats", ".h", ".idc"]},
    "C#": {"color": "#178600", "aliases": ["csharp", "cake", "cakescript"], "extensions": [".cs", ".cake", ".csx", ".linq"]},
    "C++": {"color": "#f34b7d", "aliases": ["cpp"], "extensions": [".cpp", ".c++", ".cc", ".cp", ".cxx", ".h", ".h++", ".hh", ".hpp", ".hxx", ".inl", ".ipp", ".tcc", ".tpp"]},
    "C3": {"color": "#2563eb", "aliases": [], "extensions": [".c3"]},
    "Cabal Config": {"color": "#483465", "aliases": ["cabal"], "extensions": [".cabal"]},
    "Caddyfile": {"color": "#22b638", "aliases": ["caddy"], "extensions": [".caddyfile"]},
    "Cadence": {"color": "#00ef8b", "aliases": [], "extensions": [".cdc"]},
    "Cairo": {"color": "#ff4a48", "aliases": [], "extensions": [".cairo"]},
    "Cairo Zero": {"color": "#ff4a48", "aliases": [], "extensions": [".cairo"]},
    "CameLIGO": {"color": "#3be133", "aliases": [], "extensions": [".mligo"]},
    "CAP CDS": {"color": "#0092d1", "aliases": ["cds"], "extensions": [".cds"]},
    "Ceylon": {"color": "#dfa535", "aliases": [], "extensions": [".ceylon"]},
    "Chapel": {"color": "#8dc63f", "aliases": ["chpl"], "extensions": [".chpl"]},
    "ChucK": {"color": "#3f8000", "aliases": [], "extensions": [".ck"]},
    "Circom": {"color": "#707575", "aliases": [], "extensions": [".circom"]},
    "Cirru": {"color": "#ccccff", "aliases": [], "extensions": [".cirru"]},
    "Clarion": {"color": "#db901e", "aliases": [], "extensions": [".clw"]},
    "Clarity": {"color": "#5546ff", "aliases": [], "extensions": [".clar"]},
    "Classic ASP": {"color": "#6a40fd", "aliases": ["asp"], "extensions": [".asp"]},
    "Clean": {"color": "#3F85AF", "aliases": [], "extensions": [".icl", ".dcl"]},
    "Click": {"color": "#E4E6F3", "aliases": [], "extensions": [".click"]},
    "CLIPS": {"color": "#00A300", "aliases": [], "extensions": [".clp"]},
    "Clojure": {"color": "#db5855", "aliases": [], "extensions": [".clj", ".boot", ".cl2", ".cljc", ".cljs", ".cljscm", ".cljx", ".hic"]},
    "Closure Templates": {"color": "#0d948f", "aliases": ["soy"], "extensions": [".soy"]},
    "Cloud Firestore Security Rules": {"color": "#FFA000", "aliases": [], "extensions": []},
    "Clue": {"color": "#0009b5", "aliases": [], "extensions": [".clue"]},
    "CMake": {"color": "#DA3434", "aliases": [], "extensions": [".cmake", ".cmake.in"]},
    "CodeQL": {"color": "#140f46", "aliases": ["ql"], "extensions": [".ql", ".qll"]},
    "CoffeeScript": {"color": "#244776", "aliases": ["coffee", "coffee-script"], "extensions": [".coffee", "._coffee", ".cjsx", ".iced"]},
    "ColdFusion": {"color": "#ed2cd6", "aliases": ["cfm", "cfml", "coldfusion html"], "extensions": [".cfm", ".cfml"]},
    "ColdFusion CFC": {"color": "#ed2cd6", "aliases": ["cfc"], "extensions": [".cfc"]},
    "Common Lisp": {"color": "#3fb68b", "aliases": ["lisp"], "extensions": [".lisp", ".asd", ".cl", ".l", ".lsp", ".ny", ".podsl", ".sexp"]},
    "Common Workflow Language": {"color": "#B5314C", "aliases": ["cwl"], "extensions": [".cwl"]},
    "Component Pascal": {"color": "#B0CE4E", "aliases": [], "extensions": [".cp", ".cps"]},
    "Cooklang": {"color": "#E15A29", "aliases": [], "extensions": [".cook"]},
    "Crystal": {"color": "#000100", "aliases": [], "extensions": [".cr"]},
    "CSON": {"color": "#244776", "aliases": [], "extensions": [".cson"]},
    "Csound": {"color": "#1a1a1a", "aliases": ["csound-orc"], "extensions": [".orc", ".udo"]},
    "Csound Document": {"color": "#1a1a1a", "aliases": ["csound-csd"], "extensions": [".csd"]},
    "Csound Score": {"color": "#1a1a1a", "aliases": ["csound-sco"], "extensions": [".sco"]},
    "CSS": {"color": "#563d7c", "aliases": [], "extensions": [".css"]},
    "CSV": {"color": "#237346", "aliases": [], "extensions": [".csv"]},
    "Cuda": {"color": "#3A4E3A", "aliases": [], "extensions": [".cu", ".cuh"]},
    "CUE": {"color": "#5886E1", "aliases": [], "extensions": [".cue"]},
    "Curry": {"color": "#531242", "aliases": [], "extensions": [".curry"]},
    "Cypher": {"color": "#34c0eb", "aliases": [], "extensions": [".cyp", ".cypher"]},
    "Cython": {"color": "#fedf5b", "aliases": ["pyrex"], "extensions": [".pyx", ".pxd", ".pxi"]},
    "D": {"color": "#ba595e", "aliases": ["dlang"], "extensions": [".d", ".di"]},
    "D2": {"color": "#526ee8", "aliases": ["d2lang"], "extensions": [".d2"]},
    "Dafny": {"color": "#FFEC25", "aliases": [], "extensions": [".dfy"]},
    "Darcs Patch": {"color": "#8eff23", "aliases": ["dpatch"], "extensions": [".darcspatch", ".dpatch"]},
    "Dart": {"color": "#00B4AB", "aliases": [], "extensions": [".dart"]},
    "Daslang": {"color": "#d3d3d3", "aliases": [], "extensions": [".das"]},
    "DataWeave": {"color": "#003a52", "aliases": [], "extensions": [".dwl"]},
    "Debian Package Control File": {"color": "#D70751", "aliases": [], "extensions": [".dsc"]},
    "DenizenScript": {"color": "#FBEE96", "aliases": [], "extensions": [".dsc"]},
    "Dhall": {"color": "#dfafff", "aliases": [], "extensions": [".dhall"]},
    "DirectX 3D File": {"color": "#aace60", "aliases": [], "extensions": [".x"]},
    "DM": {"color": "#447265", "aliases": ["byond"], "extensions": [".dm"]},
    "Dockerfile": {"color": "#384d54", "aliases": ["containerfile"], "extensions": [".dockerfile"]},
    "Dogescript": {"color": "#cca760", "aliases": [], "extensions": [".djs"]},
    "Dotenv": {"color": "#e5d559", "aliases": [], "extensions": [".env"]},
    "Dylan": {"color": "#6c616e", "aliases": [], "extensions": [".dylan", ".dyl", ".intr", ".lid"]},
    "E": {"color": "#ccce35", "aliases": [], "extensions": [".e"]},
    "Earthly": {"color": "#2af0ff", "aliases": ["earthfile"], "extensions": []},
    "Easybuild": {"color": "#069406", "aliases": [], "extensions": [".eb"]},
    "eC": {"color": "#913960", "aliases": [], "extensions": [".ec", ".eh"]},
    "Ecere Projects": {"color": "#913960", "aliases": [], "extensions": [".epj"]},
    "ECL": {"color": "#8a1267", "aliases": [], "extensions": [".ecl", ".eclxml"]},
    "ECLiPSe": {"color": "#001d9d", "aliases": [], "extensions": [".ecl"]},
    "Ecmarkup": {"color": "#eb8131", "aliases": ["ecmarkdown"], "extensions": [".html"]},
    "Edge": {"color": "#0dffe0", "aliases": [], "extensions": [".edge"]},
    "EdgeQL": {"color": "#31A7FF", "aliases": ["esdl"], "extensions": [".edgeql", ".esdl"]},
    "EditorConfig": {"color": "#fff1f2", "aliases": ["editor-config"], "extensions": []},
    "Eiffel": {"color": "#4d6977", "aliases": [], "extensions": [".e"]},
    "EJS": {"color": "#a91e50", "aliases": [], "extensions": [".ejs"]},
    "Elixir": {"color": "#6e4a7e", "aliases": [], "extensions": [".ex", ".exs"]},
    "Elm": {"color": "#60B5CC", "aliases": [], "extensions": [".elm"]},
    "Elvish": {"color": "#55BB55", "aliases": [], "extensions": [".elv"]},
    "Emacs Lisp": {"color": "#c065db", "aliases": ["elisp", "emacs"], "extensions": [".el", ".emacs", ".emacs.desktop"]},
    "EmberScript": {"color": "#FFF4F3", "aliases": [], "extensions": [".em", ".emberscript"]},
    "EQ": {"color": "#a78649", "aliases": [], "extensions": [".eq"]},
    "Erlang": {"color": "#B83998", "aliases": [], "extensions": [".erl", ".app", ".escript", ".hrl", ".xrl", ".yrl"]},
    "Euphoria": {"color": "#FF790B", "aliases": [], "extensions": [".e", ".ex"]},
    "F#": {"color": "#b845fc", "aliases": ["fsharp"], "extensions": [".fs", ".fsi", ".fsx"]},
    "F*": {"color": "#572e30", "aliases": ["fstar"], "extensions": [".fst", ".fsti"]},
    "Factor": {"color": "#636746", "aliases": [], "extensions": [".factor"]},
    "Fancy": {"color": "#7b9db4", "aliases": [], "extensions": [".fy", ".fancypack"]},
    "Fantom": {"color": "#14253c", "aliases": [], "extensions": [".fan"]},
    "Faust": {"color": "#c37240", "aliases": [], "extensions": [".dsp"]},
    "Fennel": {"color": "#fff3d7", "aliases": [], "extensions": [".fnl"]},
    "FIGlet Font": {"color": "#FFDDBB", "aliases": ["figfont"], "extensions": [".flf"]},
    "Filebench WML": {"color": "#F6B900", "aliases": [], "extensions": [".f"]},
    "fish": {"color": "#4aae47", "aliases": [], "extensions": [".fish"]},
    "Fluent": {"color": "#ffcc33", "aliases": [], "extensions": [".ftl"]},
    "FLUX": {"color": "#88ccff", "aliases": [], "extensions": [".fx", ".flux"]},
    "Forth": {"color": "#341708", "aliases": [], "extensions": [".fth", ".4th", ".forth", ".fr", ".frt"]},
    "Fortran": {"color": "#4d41b1", "aliases": [], "extensions": [".f", ".f77", ".for", ".fpp"]},
    "Fortran Free Form": {"color": "#4d41b1", "aliases": [], "extensions": [".f90", ".f03", ".f08", ".f95"]},
    "FreeBasic": {"color": "#141AC9", "aliases": ["fb"], "extensions": [".bi", ".bas"]},
    "FreeMarker": {"color": "#0050b2", "aliases": ["ftl"], "extensions": [".ftl"]},
    "Frege": {"color": "#00cafe", "aliases": [], "extensions": [".fr"]},
    "Futhark": {"color": "#5f021f", "aliases": [], "extensions": [".fut"]},
    "G-code": {"color": "#D08CF2", "aliases": [], "extensions": [".g", ".cnc", ".gco", ".gcode"]},
    "Game Maker Language": {"color": "#71b417", "aliases": [], "extensions": [".gml"]},
    "GAML": {"color": "#FFC766", "aliases": [], "extensions": [".experiment", ".gaml"]},
    "GAMS": {"color": "#f49a22", "aliases": [], "extensions": [".gms"]},
    "GAP": {"color": "#0000cc", "aliases": [], "extensions": [".g", ".gap", ".gd", ".gi", ".tst"]},
    "GCC Machine Description": {"color": "#FFCFAB", "aliases": [], "extensions": [".md"]},
    "GDScript": {"color": "#355570", "aliases": [], "extensions": [".gd"]},
    "GEDCOM": {"color": "#003058", "aliases": [], "extensions": [".ged"]},
    "Gemini": {"color": "#ff6900", "aliases": [], "extensions": [".gmi"]},
    "Genero 4gl": {"color": "#63408e", "aliases": [], "extensions": [".4gl"]},
    "Genero per": {"color": "#d8df39", "aliases": [], "extensions": [".per"]},
    "Genie": {"color": "#fb855d", "aliases": [], "extensions": [".gs"]},
    "Genshi": {"color": "#951531", "aliases": ["xml+genshi", "xml+kid"], "extensions": [".kid"]},
    "Gentoo Ebuild": {"color": "#9400ff", "aliases": [], "extensions": [".ebuild"]},
    "Gentoo Eclass": {"color": "#9400ff", "aliases": [], "extensions": [".eclass"]},
    "Gerber Image": {"color": "#d20b00", "aliases": ["rs-274x"], "extensions": [".gbr"]},
    "Gherkin": {"color": "#5B2063", "aliases": ["cucumber"], "extensions": [".feature", ".story"]},
    "Git Attributes": {"color": "#F44D27", "aliases": ["gitattributes"], "extensions": []},
    "Git Commit": {"color": "#F44D27", "aliases": [], "extensions": []},
    "Git Config": {"color": "#F44D27", "aliases": ["gitconfig", "gitmodules"], "extensions": [".gitconfig"]},
    "Git Revision List": {"color": "#F44D27", "aliases": [], "extensions": []},
    "Gleam": {"color": "#ffaff3", "aliases": [], "extensions": [".gleam"]},
    "Glimmer JS": {"color": "#F5835F", "aliases": [], "extensions": [".gjs"]},
    "Glimmer TS": {"color": "#3178c6", "aliases": [], "extensions": [".gts"]},
    "GLSL": {"color": "#5686a5", "aliases": [], "extensions": [".glsl", ".frag", ".geom", ".vert", ".vs", ".fs"]},
    "Glyph": {"color": "#c1ac7f", "aliases": [], "extensions": [".glf"]},
    "Gnuplot": {"color": "#f0a9f0", "aliases": [], "extensions": [".gp", ".gnu", ".gnuplot", ".plot", ".plt"]},
    "Go": {"color": "#00ADD8", "aliases": ["golang"], "extensions": [".go"]},
    "Go Checksums": {"color": "#00ADD8", "aliases": ["go.sum", "go sum"], "extensions": []},
    "Go Module": {"color": "#00ADD8", "aliases": ["go.mod", "go mod"], "extensions": []},
    "Go Workspace": {"color": "#00ADD8", "aliases": ["go.work", "go work"], "extensions": []},
    "Godot Resource": {"color": "#355570", "aliases": [], "extensions": [".gdnlib", ".gdns", ".tres", ".tscn"]},
    "Golo": {"color": "#88562A", "aliases": [], "extensions": [".golo"]},
    "Gosu": {"color": "#82937f", "aliases": [], "extensions": [".gs", ".gst", ".gsx", ".vark"]},
    "Grace": {"color": "#615f8b", "aliases": [], "extensions": [".grace"]},
    "Gradle": {"color": "#02303a", "aliases": [], "extensions": [".gradle"]},
    "Gradle Kotlin DSL": {"color": "#02303a", "aliases": [], "extensions": [".gradle.kts"]},
    "Grammatical Framework": {"color": "#ff0000", "aliases": ["gf"], "extensions": [".gf"]},
    "GraphQL": {"color": "#e10098", "aliases": [], "extensions": [".graphql", ".gql", ".graphqls"]},
    "Graphviz (DOT)": {"color": "#2596be", "aliases": [], "extensions": [".dot", ".gv"]},
    "Groovy": {"color": "#4298b8", "aliases": [], "extensions": [".groovy", ".grt", ".gtpl", ".gvy"]},
    "Groovy Server Pages": {"color": "#4298b8", "aliases": ["gsp", "java server page"], "extensions": [".gsp"]},
    "GSC": {"color": "#FF6800", "aliases": [], "extensions": [".gsc", ".csc", ".gsh"]},
    "Hack": {"color": "#878787", "aliases": [], "extensions": [".hack", ".hh", ".hhi", ".php"]},
    "Haml": {"color": "#ece2a9", "aliases": [], "extensions": [".haml", ".haml.deface"]},
    "Handlebars": {"color": "#f7931e", "aliases": ["hbs", "htmlbars"], "extensions": [".handlebars", ".hbs"]},
    "HAProxy": {"color": "#106da9", "aliases": [], "extensions": [".cfg"]},
    "Harbour": {"color": "#0e60e3", "aliases": [], "extensions": [".hb"]},
    "Hare": {"color": "#9d7424", "aliases": [], "extensions": [".ha"]},
    "Haskell": {"color": "#5e5086", "aliases": [], "extensions": [".hs", ".hs-boot", ".hsc"]},
    "Haxe": {"color": "#df7900", "aliases": [], "extensions": [".hx", ".hxsl"]},
    "HCL": {"color": "#844FBA", "aliases": ["hashicorp configuration language", "terraform"], "extensions": [".hcl", ".nomad", ".tf", ".tfvars", ".workflow"]},
    "HIP": {"color": "#4F3A4F", "aliases": [], "extensions": [".hip"]},
    "HiveQL": {"color": "#dce200", "aliases": [], "extensions": [".q", ".hql"]},
    "HLSL": {"color": "#aace60", "aliases": [], "extensions": [".hlsl", ".cginc", ".fx", ".fxh", ".hlsli"]},
    "HOCON": {"color": "#9ff8ee", "aliases": [], "extensions": [".hocon"]},
    "HolyC": {"color": "#ffefaf", "aliases": [], "extensions": [".hc"]},
    "hoon": {"color": "#00b171", "aliases": [], "extensions": [".hoon"]},
    "HTML": {"color": "#e34c26", "aliases": ["xhtml"], "extensions": [".html", ".hta", ".htm", ".html.hl", ".inc", ".xht", ".xhtml"]},
    "HTML+ECR": {"color": "#2e1052", "aliases": ["ecr"], "extensions": [".ecr"]},
    "HTML+EEX": {"color": "#6e4a7e", "aliases": ["eex", "heex", "leex"], "extensions": [".eex", ".html.heex", ".html.leex"]},
    "HTML+ERB": {"color": "#701516", "aliases": ["erb", "rhtml", "html+ruby"], "extensions": [".erb", ".erb.deface", ".rhtml"]},
    "HTML+PHP": {"color": "#4f5d95", "aliases": [], "extensions": [".phtml"]},
    "HTML+Razor": {"color": "#512be4", "aliases": ["razor"], "extensions": [".cshtml", ".razor"]},
    "HTTP": {"color": "#005C9C", "aliases": [], "extensions": [".http"]},
    "HXML": {"color": "#f68712", "aliases": [], "extensions": [".hxml"]},
    "Hy": {"color": "#7790B2", "aliases": ["hylang"], "extensions": [".hy"]},
    "IDL": {"color": "#a3522f", "aliases": [], "extensions": [".pro", ".dlm"]},
    "Idris": {"color": "#b30000", "aliases": [], "extensions": [".idr", ".lidr"]},
    "Ignore List": {"color": "#000000", "aliases": ["ignore", "gitignore", "git-ignore"], "extensions": [".gitignore"]},
    "IGOR Pro": {"color": "#0000cc", "aliases": ["igor", "igorpro"], "extensions": [".ipf"]},
    "ImageJ Macro": {"color": "#99AAFF", "aliases": ["ijm"], "extensions": [".ijm"]},
    "Imba": {"color": "#16cec6", "aliases": [], "extensions": [".imba"]},
    "INI": {"color": "#d1dbe0", "aliases": ["dosini"], "extensions": [".ini", ".cfg", ".cnf", ".dof", ".lektorproject", ".prefs", ".pro", ".properties", ".url"]},
    "Inno Setup": {"color": "#264b99", "aliases": [], "extensions": [".iss", ".isl"]},
    "Io": {"color": "#a9188d", "aliases": [], "extensions": [".io"]},
    "Ioke": {"color": "#078193", "aliases": [], "extensions": [".ik"]},
    "Isabelle": {"color": "#FEFE00", "aliases": [], "extensions": [".thy"]},
    "Isabelle ROOT": {"color": "#FEFE00", "aliases": [], "extensions": []},
    "J": {"color": "#9EEDFF", "aliases": [], "extensions": [".ijs"]},
    "Janet": {"color": "#0886a5", "aliases": [], "extensions": [".janet"]},
    "JAR Manifest": {"color": "#b07219", "aliases": [], "extensions": []},
    "Jasmin": {"color": "#d03600", "aliases": [], "extensions": [".j"]},
    "Java": {"color": "#b07219", "aliases": [], "extensions": [".java", ".jav", ".jsh"]},
    "Java Properties": {"color": "#2A6277", "aliases": [], "extensions": [".properties"]},
    "Java Server Pages": {"color": "#2A6277", "aliases": ["jsp"], "extensions": [".jsp", ".tag"]},
    "Java Template Engine": {"color": "#2A6277", "aliases": ["jte"], "extensions": [".jte"]},
    "JavaScript": {"color": "#f1e05a", "aliases": ["js", "node"], "extensions": [".js", "._js", ".cjs", ".es", ".es6", ".jsb", ".jscad", ".jsfl", ".jsm", ".jss", ".jsx", ".mjs", ".njs", ".pac", ".sjs", ".ssjs", ".xsjs", ".xsjslib"]},
    "JavaScript+ERB": {"color": "#f1e05a", "aliases": [], "extensions": [".js.erb"]},
    "Jest Snapshot": {"color": "#15c213", "aliases": [], "extensions": [".snap"]},
    "JetBrains MPS": {"color": "#21D789", "aliases": ["mps"], "extensions": [".mps", ".mpl", ".msd"]},
    "JFlex": {"color": "#DBCA00", "aliases": [], "extensions": [".flex", ".jflex"]},
    "Jinja": {"color": "#a52a22", "aliases": ["django", "html+django", "html+jinja", "htmldjango"], "extensions": [".jinja", ".j2", ".jinja2", ".mustache"]},
    "Jolie": {"color": "#843179", "aliases": [], "extensions": [".ol", ".iol"]},
    "JSON": {"color": "#292929", "aliases": ["geojson", "jsonl", "topojson"], "extensions": [".json", ".4DForm", ".4DProject", ".avsc", ".geojson", ".gltf", ".har", ".ice", ".JSON-tmLanguage", ".jsonl", ".mcmeta", ".tfstate", ".topojson", ".webapp", ".webmanifest", ".yy", ".yyp"]},
    "JSON with Comments": {"color": "#292929", "aliases": ["jsonc"], "extensions": [".jsonc", ".code-snippets", ".code-workspace", ".sublime-settings"]},
    "JSON5": {"color": "#267CB9", "aliases": [], "extensions": [".json5"]},
    "JSONiq": {"color": "#40d47e", "aliases": [], "extensions": [".jq"]},
    "JSONLD": {"color": "#0c479c", "aliases": [], "extensions": [".jsonld"]},
    "Jsonnet": {"color": "#0064bd", "aliases": [], "extensions": [".jsonnet", ".libsonnet"]},
    "Julia": {"color": "#a270ba", "aliases": [], "extensions": [".jl"]},
    "Julia REPL": {"color": "#a270ba", "aliases": [], "extensions": []},
    "Jupyter Notebook": {"color": "#DA5B0B", "aliases": ["ipython notebook"], "extensions": [".ipynb"]},
    "Just": {"color": "#384d54", "aliases": ["justfile"], "extensions": [".just"]},
    "Kaitai Struct": {"color": "#773b37", "aliases": ["ksy"], "extensions": [".ksy"]},
    "KakouneScript": {"color": "#6f8042", "aliases": ["kak", "kakscript"], "extensions": [".kak"]},
    "KerboScript": {"color": "#41adf0", "aliases": [], "extensions": [".ks"]},
    "KiCad Layout": {"color": "#2f4aab", "aliases": ["pcbnew"], "extensions": [".kicad_pcb", ".kicad_mod", ".kicad_wks"]},
    "KiCad Legacy Layout": {"color": "#2f4aab", "aliases": [], "extensions": [".brd"]},
    "KiCad Schematic": {"color": "#2f4aab", "aliases": ["eeschema schematic"], "extensions": [".kicad_sch", ".sch"]},
    "KoLmafia ASH": {"color": "#B9D9FF", "aliases": [], "extensions": [".ash"]},
    "Koka": {"color": "#215166", "aliases": [], "extensions": [".kk"]},
    "Kotlin": {"color": "#A97BFF", "aliases": [], "extensions": [".kt", ".ktm", ".kts"]},
    "KRL": {"color": "#28430A", "aliases": [], "extensions": [".krl"]},
    "LabVIEW": {"color": "#fede06", "aliases": [], "extensions": [".lvproj", ".lvclass", ".lvlib"]},
    "Lark": {"color": "#2980B9", "aliases": [], "extensions": [".lark"]},
    "Lasso": {"color": "#999999", "aliases": ["lassoscript"], "extensions": [".lasso", ".las", ".lasso8", ".lasso9"]},
    "Latte": {"color": "#f2a542", "aliases": [], "extensions": [".latte"]},
    "Leo": {"color": "#C4FFC2", "aliases": [], "extensions": [".leo"]},
    "Less": {"color": "#1d365d", "aliases": ["less-css"], "extensions": [".less"]},
    "Lex": {"color": "#DBCA00", "aliases": ["flex"], "extensions": [".l", ".lex"]},
    "LFE": {"color": "#4C3023", "aliases": [], "extensions": [".lfe"]},
    "LigoLANG": {"color": "#0e74ff", "aliases": [], "extensions": [".ligo"]},
    "LilyPond": {"color": "#9ccc7c", "aliases": [], "extensions": [".ly", ".ily"]},
    "Liquid": {"color": "#67b8de", "aliases": [], "extensions": [".liquid"]},
    "Literate Agda": {"color": "#315665", "aliases": [], "extensions": [".lagda"]},
    "Literate CoffeeScript": {"color": "#244776", "aliases": ["litcoffee"], "extensions": [".litcoffee", ".coffee.md"]},
    "Literate Haskell": {"color": "#5e5086", "aliases": ["lhaskell", "lhs"], "extensions": [".lhs"]},
    "LiveCode Script": {"color": "#0c5ba5", "aliases": [], "extensions": [".livecodescript"]},
    "LiveScript": {"color": "#499886", "aliases": ["live-script", "ls"], "extensions": [".ls", "._ls"]},
    "LLVM": {"color": "#185619", "aliases": [], "extensions": [".ll"]},
    "Logtalk": {"color": "#295b9a", "aliases": [], "extensions": [".lgt", ".logtalk"]},
    "LOLCODE": {"color": "#cc9900", "aliases": [], "extensions": [".lol"]},
    "LookML": {"color": "#652B81", "aliases": [], "extensions": [".lkml", ".lookml"]},
    "LSL": {"color": "#3d9970", "aliases": [], "extensions": [".lsl", ".lslp"]},
    "Lua": {"color": "#000080", "aliases": [], "extensions": [".lua", ".fcgi", ".nse", ".p8", ".pd_lua", ".rbxs", ".rockspec", ".wlua"]},
    "Luau": {"color": "#00A2FF", "aliases": [], "extensions": [".luau"]},
    "Macaulay2": {"color": "#d8ffff", "aliases": ["m2"], "extensions": [".m2"]},
    "Makefile": {"color": "#427819", "aliases": ["bsdmake", "make", "mf"], "extensions": [".mak", ".d", ".make", ".makefile", ".mk", ".mkfile"]},
    "Mako": {"color": "#7e858d", "aliases": [], "extensions": [".mako", ".mao"]},
    "Markdown": {"color": "#083fa1", "aliases": ["md", "pandoc"], "extensions": [".md", ".livemd", ".markdown", ".mdown", ".mdwn", ".mkd", ".mkdn", ".mkdown", ".ronn", ".scd", ".workbook"]},
    "Marko": {"color": "#42bff2", "aliases": ["markojs"], "extensions": [".marko"]},
    "Mask": {"color": "#f97732", "aliases": [], "extensions": [".mask"]},
    "Mathematica": {"color": "#dd1100", "aliases": ["mma", "wolfram", "wolfram language", "wolfram lang", "wl"], "extensions": [".mathematica", ".cdf", ".m", ".ma", ".mt", ".nb", ".nbp", ".wl", ".wlt"]},
    "MATLAB": {"color": "#e16737", "aliases": ["octave"], "extensions": [".matlab", ".m"]},
    "Max": {"color": "#c4a79c", "aliases": ["max/msp", "maxmsp"], "extensions": [".maxpat", ".maxhelp", ".maxproj", ".mxt", ".pat"]},
    "MAXScript": {"color": "#00a6a6", "aliases": [], "extensions": [".ms", ".mcr"]},
    "mcfunction": {"color": "#E22837", "aliases": [], "extensions": [".mcfunction"]},
    "MDX": {"color": "#fcb32c", "aliases": [], "extensions": [".mdx"]},
    "Mercury": {"color": "#ff2b2b", "aliases": [], "extensions": [".m", ".moo"]},
    "Mermaid": {"color": "#ff3670", "aliases": ["mermaid example"], "extensions": [".mmd", ".mermaid"]},
    "Meson": {"color": "#007800", "aliases": [], "extensions": []},
    "Metal": {"color": "#8f14e9", "aliases": [], "extensions": [".metal"]},
    "MiniYAML": {"color": "#ff1111", "aliases": [], "extensions": [".yaml", ".yml"]},
    "MiniZinc": {"color": "#06a9e6", "aliases": [], "extensions": [".mzn"]},
    "Mint": {"color": "#02b046", "aliases": [], "extensions": [".mint"]},
    "Mirah": {"color": "#c7a938", "aliases": [], "extensions": [".druby", ".duby", ".mirah"]},
    "MLIR": {"color": "#5EC8DB", "aliases": [], "extensions": [".mlir"]},
    "Modelica": {"color": "#de1d31", "aliases": [], "extensions": [".mo"]},
    "Modula-2": {"color": "#10253f", "aliases": [], "extensions": [".mod"]},
    "Modula-3": {"color": "#223388", "aliases": [], "extensions": [".i3", ".ig", ".m3", ".mg"]},
    "Mojo": {"color": "#ff4c1f", "aliases": [], "extensions": [".mojo"]},
    "Monkey C": {"color": "#8D6747", "aliases": [], "extensions": [".mc"]},
    "MoonBit": {"color": "#b92381", "aliases": [], "extensions": [".mbt"]},
    "MoonScript": {"color": "#ff4585", "aliases": [], "extensions": [".moon"]},
    "Motoko": {"color": "#fbb03b", "aliases": [], "extensions": [".mo"]},
    "Motorola 68K Assembly": {"color": "#005daa", "aliases": ["m68k"], "extensions": [".asm", ".i", ".inc", ".s", ".x68"]},
    "Move": {"color": "#4a137a", "aliases": [], "extensions": [".move"]},
    "MQL4": {"color": "#62A8D6", "aliases": [], "extensions": [".mq4", ".mqh"]},
    "MQL5": {"color": "#4A76B8", "aliases": [], "extensions": [".mq5", ".mqh"]},
    "MTML": {"color": "#b7e1f4", "aliases": [], "extensions": [".mtml"]},
    "mupad": {"color": "#244963", "aliases": [], "extensions": [".mu"]},
    "Mustache": {"color": "#724b3b", "aliases": [], "extensions": [".mustache"]},
    "Nasal": {"color": "#1d2c4e", "aliases": [], "extensions": [".nas"]},
    "NCL": {"color": "#28431f", "aliases": [], "extensions": [".ncl"]},
    "Nearley": {"color": "#990000", "aliases": [], "extensions": [".ne", ".nearley"]},
    "Nemerle": {"color": "#3d3c6e", "aliases": [], "extensions": [".n"]},
    "nesC": {"color": "#94B0C7", "aliases": [], "extensions": [".nc"]},
    "NetLinx": {"color": "#0aa0ff", "aliases": [], "extensions": [".axs", ".axi"]},
    "NetLinx+ERB": {"color": "#747faa", "aliases": [], "extensions": [".axs.erb", ".axi.erb"]},
    "NetLogo": {"color": "#ff6375", "aliases": [], "extensions": [".nlogo"]},
    "NewLisp": {"color": "#87AED7", "aliases": [], "extensions": [".nl", ".lisp", ".lsp"]},
    "Nextflow": {"color": "#3ac486", "aliases": [], "extensions": [".nf"]},
    "Nginx": {"color": "#009639", "aliases": ["nginx configuration file"], "extensions": [".nginx", ".nginxconf", ".vhost"]},
    "Nickel": {"color": "#E0C3FC", "aliases": [], "extensions": [".ncl"]},
    "Nim": {"color": "#ffc200", "aliases": [], "extensions": [".nim", ".nim.cfg", ".nimble", ".nimrod", ".nims"]},
    "Nit": {"color": "#009917", "aliases": [], "extensions": [".nit"]},
    "Nix": {"color": "#7e7eff", "aliases": ["nixos"], "extensions": [".nix"]},
    "NMODL": {"color": "#00356B", "aliases": [], "extensions": [".mod"]},
    "Noir": {"color": "#2f1f49", "aliases": ["nargo"], "extensions": [".nr"]},
    "NPM Config": {"color": "#cb3837", "aliases": ["npmrc"], "extensions": []},
    "Nu": {"color": "#c9df40", "aliases": ["nush"], "extensions": [".nu"]},
    "Nunjucks": {"color": "#3d8137", "aliases": ["njk"], "extensions": [".njk"]},
    "Nushell": {"color": "#4E9906", "aliases": ["nu-script", "nushell"], "extensions": [".nu"]},
    "NWScript": {"color": "#111522", "aliases": [], "extensions": [".nss"]},
    "Objective-C": {"color": "#438eff", "aliases": ["obj-c", "objc", "objectivec"], "extensions": [".m", ".h"]},
    "Objective-C++": {"color": "#6866fb", "aliases": ["obj-c++", "objc++", "objectivec++"], "extensions": [".mm"]},
    "Objective-J": {"color": "#ff0c5a", "aliases": ["obj-j", "objectivej", "objj"], "extensions": [".j", ".sj"]},
    "ObjectScript": {"color": "#424893", "aliases": [], "extensions": [".cls"]},
    "OCaml": {"color": "#ef7a08", "aliases": [], "extensions": [".ml", ".eliom", ".eliomi", ".ml4", ".mli", ".mll", ".mly"]},
    "Odin": {"color": "#60AFFE", "aliases": ["odinlang", "odin-lang"], "extensions": [".odin"]},
    "Omgrofl": {"color": "#cabbff", "aliases": [], "extensions": [".omgrofl"]},
    "Opal": {"color": "#f7ede0", "aliases": [], "extensions": [".opal"]},
    "Open Policy Agent": {"color": "#7d9199", "aliases": [], "extensions": [".rego"]},
    "OpenAPI Specification v2": {"color": "#85ea2d", "aliases": ["oasv2"], "extensions": []},
    "OpenAPI Specification v3": {"color": "#85ea2d", "aliases": ["oasv3"], "extensions": []},
    "OpenCL": {"color": "#ed2e2d", "aliases": [], "extensions": [".cl", ".opencl"]},
    "OpenEdge ABL": {"color": "#5ce600", "aliases": ["progress", "openedge", "abl"], "extensions": [".p", ".cls", ".w"]},
    "OpenQASM": {"color": "#AA70FF", "aliases": [], "extensions": [".qasm"]},
    "OpenSCAD": {"color": "#e5cd45", "aliases": [], "extensions": [".scad"]},
    "Org": {"color": "#77aa99", "aliases": [], "extensions": [".org"]},
    "Oxygene": {"color": "#cdd0e3", "aliases": [], "extensions": [".oxygene"]},
    "Oz": {"color": "#fab738", "aliases": [], "extensions": [".oz"]},
    "P4": {"color": "#7055b5", "aliases": [], "extensions": [".p4"]},
    "Pact": {"color": "#F7A8B8", "aliases": [], "extensions": [".pact"]},
    "Pan": {"color": "#cc0000", "aliases": [], "extensions": [".pan"]},
    "Papyrus": {"color": "#6600cc", "aliases": [], "extensions": [".psc"]},
    "Parrot": {"color": "#f3ca0a", "aliases": [], "extensions": [".parrot"]},
    "Pascal": {"color": "#E3F171", "aliases": ["delphi", "objectpascal"], "extensions": [".pas", ".dfm", ".dpr", ".inc", ".lpr", ".pascal", ".pp"]},
    "Pawn": {"color": "#dbb284", "aliases": [], "extensions": [".pwn", ".inc", ".sma"]},
    "PDDL": {"color": "#0d00ff", "aliases": [], "extensions": [".pddl"]},
    "PEG.js": {"color": "#234d6b", "aliases": [], "extensions": [".pegjs", ".peggy"]},
    "Pep8": {"color": "#C76F5B", "aliases": [], "extensions": [".pep"]},
    "Perl": {"color": "#0298c3", "aliases": ["cperl"], "extensions": [".pl", ".al", ".cgi", ".fcgi", ".perl", ".ph", ".plx", ".pm", ".psgi", ".t"]},
    "PHP": {"color": "#4F5D95", "aliases": ["inc"], "extensions": [".php", ".aw", ".ctp", ".fcgi", ".inc", ".php3", ".php4", ".php5", ".phps", ".phpt"]},
    "PicoLisp": {"color": "#6067af", "aliases": [], "extensions": [".l"]},
    "PigLatin": {"color": "#fcd7de", "aliases": [], "extensions": [".pig"]},
    "Pike": {"color": "#005390", "aliases": [], "extensions": [".pike", ".pmod"]},
    "Pip Requirements": {"color": "#FFD343", "aliases": [], "extensions": []},
    "Pkl": {"color": "#6b9543", "aliases": [], "extensions": [".pkl"]},
    "PlantUML": {"color": "#fbbd16", "aliases": [], "extensions": [".puml", ".iuml", ".plantuml"]},
    "PLpgSQL": {"color": "#336790", "aliases": [], "extensions": [".pgsql", ".sql"]},
    "PLSQL": {"color": "#dad8d8", "aliases": [], "extensions": [".pls", ".bdy", ".ddl", ".fnc", ".pck", ".pkb", ".pks", ".plb", ".plsql", ".prc", ".spc", ".sql", ".tpb", ".tps", ".trg", ".vw"]},
    "PogoScript": {"color": "#d80074", "aliases": [], "extensions": [".pogo"]},
    "Polar": {"color": "#ae81ff", "aliases": [], "extensions": [".polar"]},
    "Portugol": {"color": "#f8bd00", "aliases": [], "extensions": [".por"]},
    "PostCSS": {"color": "#dc3a0c", "aliases": ["postcss"], "extensions": [".pcss", ".postcss"]},
    "PostScript": {"color": "#da291c", "aliases": ["postscr"], "extensions": [".ps", ".eps", ".epsf", ".epsi", ".pfa"]},
    "POV-Ray SDL": {"color": "#6bac65", "aliases": ["pov-ray", "povray"], "extensions": [".pov", ".inc"]},
    "PowerBuilder": {"color": "#8f0f8d", "aliases": [], "extensions": [".pbt", ".sra", ".sru", ".srw"]},
    "PowerShell": {"color": "#012456", "aliases": ["posh", "pwsh"], "extensions": [".ps1", ".psd1", ".psm1"]},
    "Praat": {"color": "#c8506d", "aliases": [], "extensions": [".praat"]},
    "Prisma": {"color": "#0c344b", "aliases": [], "extensions": [".prisma"]},
    "Processing": {"color": "#0096D8", "aliases": [], "extensions": [".pde"]},
    "Procfile": {"color": "#3B2F63", "aliases": [], "extensions": []},
    "Prolog": {"color": "#74283c", "aliases": [], "extensions": [".pl", ".plt", ".pro", ".prolog", ".yap"]},
    "Promela": {"color": "#de0000", "aliases": [], "extensions": [".pml"]},
    "Propeller Spin": {"color": "#7fa2a7", "aliases": [], "extensions": [".spin"]},
    "Pug": {"color": "#a86454", "aliases": [], "extensions": [".jade", ".pug"]},
    "Puppet": {"color": "#302B6D", "aliases": [], "extensions": [".pp"]},
    "PureBasic": {"color": "#5a6986", "aliases": [], "extensions": [".pb", ".pbi"]},
    "PureScript": {"color": "#1D222D", "aliases": [], "extensions": [".purs"]},
    "Pyret": {"color": "#ee1e10", "aliases": [], "extensions": [".arr"]},
    "Python": {"color": "#3572A5", "aliases": ["python3", "rusthon"], "extensions": [".py", ".cgi", ".fcgi", ".gyp", ".gypi", ".lmi", ".py3", ".pyde", ".pyi", ".pyp", ".pyt", ".pyw", ".rpy", ".spec", ".tac", ".wsgi", ".xpy"]},
    "Python console": {"color": "#3572A5", "aliases": ["pycon"], "extensions": []},
    "Q#": {"color": "#fed659", "aliases": ["qsharp"], "extensions": [".qs"]},
    "QML": {"color": "#44a51c", "aliases": [], "extensions": [".qml", ".qbs"]},
    "Qt Script": {"color": "#00b841", "aliases": [], "extensions": [".qs"]},
    "Quake": {"color": "#882233", "aliases": [], "extensions": []},
    "QuickBASIC": {"color": "#008080", "aliases": ["qb", "qbasic", "qb64", "classic qbasic", "classic quickbasic"], "extensions": [".bas"]},
    "R": {"color": "#198CE7", "aliases": ["rscript", "splus"], "extensions": [".r", ".rd", ".rsx"]},
    "Racket": {"color": "#3c5caa", "aliases": [], "extensions": [".rkt", ".rktd", ".rktl", ".scrbl"]},
    "Ragel": {"color": "#9d5200", "aliases": ["ragel-rb", "ragel-ruby"], "extensions": [".rl"]},
    "Raku": {"color": "#0000fb", "aliases": ["perl6", "perl-6"], "extensions": [".6pl", ".6pm", ".nqp", ".p6", ".p6l", ".p6m", ".pl", ".pl6", ".pm", ".pm6", ".raku", ".rakumod", ".t"]},
    "RAML": {"color": "#77d9fb", "aliases": [], "extensions": [".raml"]},
    "Rascal": {"color": "#fffaa0", "aliases": [], "extensions": [".rsc"]},
    "RBS": {"color": "#701516", "aliases": [], "extensions": [".rbs"]},
    "RDoc": {"color": "#701516", "aliases": [], "extensions": [".rdoc"]},
    "Reason": {"color": "#ff5847", "aliases": [], "extensions": [".re", ".rei"]},
    "ReasonLIGO": {"color": "#ff5847", "aliases": [], "extensions": [".religo"]},
    "Rebol": {"color": "#358a5b", "aliases": [], "extensions": [".reb", ".r", ".r2", ".r3", ".rebol"]},
    "Record Jar": {"color": "#0673ba", "aliases": [], "extensions": []},
    "Red": {"color": "#f50000", "aliases": ["red/system"], "extensions": [".red", ".reds"]},
    "Regular Expression": {"color": "#009a00", "aliases": ["regexp", "regex"], "extensions": [".regexp", ".regex"]},
    "Ren'Py": {"color": "#ff7f7f", "aliases": ["renpy"], "extensions": [".rpy"]},
    "ReScript": {"color": "#ed5051", "aliases": [], "extensions": [".res", ".resi"]},
    "reStructuredText": {"color": "#141414", "aliases": ["rst"], "extensions": [".rst", ".rest", ".rest.txt", ".rst.txt"]},
    "REXX": {"color": "#d90e09", "aliases": ["arexx"], "extensions": [".rexx", ".pprx", ".rex"]},
    "Ring": {"color": "#2D54CB", "aliases": [], "extensions": [".ring"]},
    "Riot": {"color": "#A71E49", "aliases": [], "extensions": [".riot"]},
    "RMarkdown": {"color": "#198ce7", "aliases": [], "extensions": [".qmd", ".rmd"]},
    "RobotFramework": {"color": "#00c0b5", "aliases": [], "extensions": [".robot", ".resource"]},
    "Roc": {"color": "#7c38f5", "aliases": [], "extensions": [".roc"]},
    "Rocq Prover": {"color": "#d0b68c", "aliases": ["coq", "rocq"], "extensions": [".v", ".coq"]},
    "Roff": {"color": "#ecdebe", "aliases": ["groff", "man", "manpage", "man page", "man-page", "mdoc", "nroff", "troff"], "extensions": [".roff", ".1", ".man", ".me", ".ms", ".nr", ".tmac"]},
    "Rouge": {"color": "#cc0088", "aliases": [], "extensions": [".rg"]},
    "RouterOS Script": {"color": "#DE3941", "aliases": [], "extensions": [".rsc"]},
    "RPGLE": {"color": "#2BDE21", "aliases": ["ile rpg", "sqlrpgle"], "extensions": [".rpgle", ".sqlrpgle"]},
    "Ruby": {"color": "#701516", "aliases": ["jruby", "macruby", "rake", "rb", "rbx"], "extensions": [".rb", ".builder", ".eye", ".fcgi", ".gemspec", ".god", ".jbuilder", ".mspec", ".pluginspec", ".podspec", ".prawn", ".rabl", ".rake", ".rbi", ".rbuild", ".rbw", ".rbx", ".ru", ".ruby", ".spec", ".thor", ".watchr"]},
    "RUNOFF": {"color": "#665a4e", "aliases": [], "extensions": [".rnh", ".rno"]},
    "Rust": {"color": "#dea584", "aliases": ["rs"], "extensions": [".rs", ".rs.in"]},
    "Sail": {"color": "#259dd5", "aliases": [], "extensions": [".sail"]},
    "SaltStack": {"color": "#646464", "aliases": ["saltstate", "salt"], "extensions": [".sls"]},
    "SAS": {"color": "#B34936", "aliases": [], "extensions": [".sas"]},
    "Sass": {"color": "#a53b70", "aliases": [], "extensions": [".sass"]},
    "Scala": {"color": "#c22d40", "aliases": [], "extensions": [".scala", ".kojo", ".sbt", ".sc"]},
    "Scaml": {"color": "#bd181a", "aliases": [], "extensions": [".scaml"]},
    "Scenic": {"color": "#fdc700", "aliases": [], "extensions": [".scenic"]},
    "Scheme": {"color": "#1e4aec", "aliases": [], "extensions": [".scm", ".sch", ".sld", ".sls", ".sps", ".ss"]},
    "Scilab": {"color": "#ca0f21", "aliases": [], "extensions": [".sci", ".sce", ".tst"]},
    "SCSS": {"color": "#c6538c", "aliases": [], "extensions": [".scss"]},
    "sed": {"color": "#64b970", "aliases": [], "extensions": [".sed"]},
    "Self": {"color": "#0579aa", "aliases": [], "extensions": [".self"]},
    "ShaderLab": {"color": "#222c37", "aliases": [], "extensions": [".shader"]},
    "Shell": {"color": "#89e051", "aliases": ["sh", "shell-script", "bash", "zsh", "envrc"], "extensions": [".sh", ".bash", ".bats", ".cgi", ".command", ".env", ".fcgi", ".ksh", ".sh.in", ".tmux", ".tool", ".trigger", ".zsh", ".zsh-theme"]},
    "ShellCheck Config": {"color": "#cecfcb", "aliases": ["shellcheckrc"], "extensions": []},
    "Shen": {"color": "#120F14", "aliases": [], "extensions": [".shen"]},
    "Singularity": {"color": "#64E6AD", "aliases": [], "extensions": []},
    "Slang": {"color": "#1fbec9", "aliases": [], "extensions": [".slang"]},
    "Slash": {"color": "#007eff", "aliases": [], "extensions": [".sl"]},
    "Slice": {"color": "#003fa2", "aliases": [], "extensions": [".ice"]},
    "Slim": {"color": "#2b2b2b", "aliases": [], "extensions": [".slim"]},
    "Slint": {"color": "#2379F4", "aliases": [], "extensions": [".slint"]},
    "Smalltalk": {"color": "#596706", "aliases": ["squeak"], "extensions": [".st"]},
    "Smarty": {"color": "#f0c040", "aliases": [], "extensions": [".tpl"]},
    "Smithy": {"color": "#c44536", "aliases": [], "extensions": [".smithy"]},
    "SmPL": {"color": "#c94949", "aliases": ["coccinelle"], "extensions": [".cocci"]},
    "Snakemake": {"color": "#419179", "aliases": ["snakefile"], "extensions": [".smk", ".snakefile"]},
    "Solidity": {"color": "#AA6746", "aliases": [], "extensions": [".sol"]},
    "SourcePawn": {"color": "#f69e1d", "aliases": ["sourcemod"], "extensions": [".sp", ".inc"]},
    "SPARQL": {"color": "#0C4597", "aliases": [], "extensions": [".sparql", ".rq"]},
    "SQF": {"color": "#3F3F3F", "aliases": [], "extensions": [".sqf", ".hqf"]},
    "SQL": {"color": "#e38c00", "aliases": [], "extensions": [".sql", ".cql", ".ddl", ".inc", ".mysql", ".prc", ".tab", ".udf", ".viw"]},
    "SQLPL": {"color": "#e38c00", "aliases": [], "extensions": [".sql", ".db2"]},
    "Squirrel": {"color": "#800000", "aliases": [], "extensions": [".nut"]},
    "SRecode Template": {"color": "#348a34", "aliases": [], "extensions": [".srt"]},
    "Stan": {"color": "#b2011d", "aliases": [], "extensions": [".stan"]},
    "Standard ML": {"color": "#dc566d", "aliases": ["sml"], "extensions": [".ml", ".fun", ".sig", ".sml"]},
    "Starlark": {"color": "#76d275", "aliases": ["bazel", "bzl"], "extensions": [".bzl", ".star"]},
    "Stata": {"color": "#1a5f91", "aliases": [], "extensions": [".do", ".ado", ".doh", ".ihlp", ".mata", ".matah", ".sthlp"]},
    "STL": {"color": "#373b5e", "aliases": ["ascii stl", "stla"], "extensions": [".stl"]},
    "StringTemplate": {"color": "#3fb34f", "aliases": [], "extensions": [".st"]},
    "Stylus": {"color": "#ff6347", "aliases": [], "extensions": [".styl"]},
    "SubRip Text": {"color": "#9e0101", "aliases": [], "extensions": [".srt"]},
    "SugarSS": {"color": "#2fcc9f", "aliases": [], "extensions": [".sss"]},
    "SuperCollider": {"color": "#46390b", "aliases": [], "extensions": [".sc", ".scd"]},
    "SurrealQL": {"color": "#ff00a0", "aliases": [], "extensions": [".surql"]},
    "Survex data": {"color": "#ffcc99", "aliases": [], "extensions": [".svx"]},
    "Svelte": {"color": "#ff3e00", "aliases": [], "extensions": [".svelte"]},
    "SVG": {"color": "#ff9900", "aliases": [], "extensions": [".svg"]},
    "Sway": {"color": "#00F58C", "aliases": [], "extensions": [".sw"]},
    "Sweave": {"color": "#198ce7", "aliases": [], "extensions": [".rnw"]},
    "Swift": {"color": "#F05138", "aliases": [], "extensions": [".swift"]},
    "SystemVerilog": {"color": "#DAE1C2", "aliases": [], "extensions": [".sv", ".svh", ".vh"]},
    "Talon": {"color": "#333333", "aliases": [], "extensions": [".talon"]},
    "Tcl": {"color": "#e4cc98", "aliases": [], "extensions": [".tcl", ".adp", ".sdc", ".tcl.in", ".tm", ".xdc"]},
    "Teal": {"color": "#00B1BC", "aliases": [], "extensions": [".tl"]},
    "templ": {"color": "#66D0DD", "aliases": [], "extensions": [".templ"]},
    "Terra": {"color": "#00004c", "aliases": [], "extensions": [".t"]},
    "Terraform Template": {"color": "#7b42bb", "aliases": [], "extensions": [".tftpl"]},
    "TeX": {"color": "#3D6117", "aliases": ["latex"], "extensions": [".tex", ".aux", ".bbx", ".cbx", ".cls", ".dtx", ".ins", ".lbx", ".ltx", ".mkii", ".mkiv", ".mkvi", ".sty", ".toc"]},
    "Textile": {"color": "#ffe7ac", "aliases": [], "extensions": [".textile"]},
    "TextMate Properties": {"color": "#df66e4", "aliases": ["tm-properties"], "extensions": []},
    "Thrift": {"color": "#D12127", "aliases": [], "extensions": [".thrift"]},
    "TI Program": {"color": "#A0AA87", "aliases": [], "extensions": [".8xp", ".8xk", ".8xk.txt", ".8xp.txt"]},
    "TL-Verilog": {"color": "#C40023", "aliases": [], "extensions": [".tlv"]},
    "TLA": {"color": "#4b0079", "aliases": [], "extensions": [".tla"]},
    "Toit": {"color": "#c2c9fb", "aliases": [], "extensions": [".toit"]},
    "TOML": {"color": "#9c4221", "aliases": [], "extensions": [".toml"]},
    "Tree-sitter Query": {"color": "#8ea64c", "aliases": ["tsq"], "extensions": [".scm"]},
    "TSQL": {"color": "#e38c00", "aliases": [], "extensions": [".sql"]},
    "TSV": {"color": "#237346", "aliases": ["tab-seperated values"], "extensions": [".tsv", ".vcf"]},
    "TSX": {"color": "#3178c6", "aliases": [], "extensions": [".tsx"]},
    "Turing": {"color": "#cf142b", "aliases": [], "extensions": [".t", ".tu"]},
    "Twig": {"color": "#c1d026", "aliases": [], "extensions": [".twig"]},
    "TypeScript": {"color": "#3178c6", "aliases": ["ts"], "extensions": [".ts", ".cts", ".mts"]},
    "TypeSpec": {"color": "#4A3665", "aliases": ["tsp"], "extensions": [".tsp"]},
    "Typst": {"color": "#239dad", "aliases": ["typ"], "extensions": [".typ"]},
    "Unified Parallel C": {"color": "#4e3617", "aliases": [], "extensions": [".upc"]},
    "Unity3D Asset": {"color": "#222c37", "aliases": [], "extensions": [".anim", ".asset", ".mat", ".meta", ".prefab", ".unity"]},
    "Uno": {"color": "#9933cc", "aliases": [], "extensions": [".uno"]},
    "UnrealScript": {"color": "#a54c4d", "aliases": [], "extensions": [".uc"]},
    "UrWeb": {"color": "#ccccee", "aliases": ["ur/web", "ur"], "extensions": [".ur", ".urs"]},
    "V": {"color": "#4f87c4", "aliases": ["vlang"], "extensions": [".v"]},
    "Vala": {"color": "#a56de2", "aliases": [], "extensions": [".vala", ".vapi"]},
    "VBA": {"color": "#867db1", "aliases": ["visual basic for applications"], "extensions": [".bas", ".cls", ".frm", ".vba"]},
    "VBScript": {"color": "#15dcdc", "aliases": [], "extensions": [".vbs"]},
    "VCL": {"color": "#148AA8", "aliases": [], "extensions": [".vcl"]},
    "Velocity Template Language": {"color": "#507cff", "aliases": ["vtl", "velocity"], "extensions": [".vtl"]},
    "Vento": {"color": "#ff0080", "aliases": [], "extensions": [".vto"]},
    "Verilog": {"color": "#b2b7f8", "aliases": [], "extensions": [".v", ".veo"]},
    "VHDL": {"color": "#adb2cb", "aliases": [], "extensions": [".vhdl", ".vhd", ".vhf", ".vhi", ".vho", ".vhs", ".vht", ".vhw"]},
    "Vim Help File": {"color": "#199f4b", "aliases": ["help", "vimhelp"], "extensions": [".txt"]},
    "Vim Script": {"color": "#199f4b", "aliases": ["vim", "viml", "nvim", "vimscript"], "extensions": [".vim", ".vba", ".vimrc", ".vmb"]},
    "Vim Snippet": {"color": "#199f4b", "aliases": ["snipmate", "ultisnip", "ultisnips", "neosnippet"], "extensions": [".snip", ".snippet", ".snippets"]},
    "Visual Basic .NET": {"color": "#945db7", "aliases": ["visual basic", "vbnet", "vb .net", "vb.net"], "extensions": [".vb", ".vbhtml"]},
    "Visual Basic 6.0": {"color": "#2c6353", "aliases": ["vb6", "vb 6", "visual basic 6", "visual basic classic", "classic visual basic"], "extensions": [".bas", ".cls", ".ctl", ".Dsr", ".frm"]},
    "Volt": {"color": "#1F1F1F", "aliases": [], "extensions": [".volt"]},
    "Vue": {"color": "#41b883", "aliases": [], "extensions": [".vue"]},
    "Vyper": {"color": "#9F4CF2", "aliases": [], "extensions": [".vy"]},
    "WDL": {"color": "#42f1f4", "aliases": ["workflow description language"], "extensions": [".wdl"]},
    "Web Ontology Language": {"color": "#5b70bd", "aliases": [], "extensions": [".owl"]},
    "WebAssembly": {"color": "#04133b", "aliases": ["wast", "wasm"], "extensions": [".wast", ".wat"]},
    "WebAssembly Interface Type": {"color": "#6250e7", "aliases": ["wit"], "extensions": [".wit"]},
    "WGSL": {"color": "#1a5e9a", "aliases": [], "extensions": [".wgsl"]},
    "Whiley": {"color": "#d5c397", "aliases": [], "extensions": [".whiley"]},
    "Wikitext": {"color": "#fc5757", "aliases": ["mediawiki", "wiki"], "extensions": [".mediawiki", ".wiki", ".wikitext"]},
    "Windows Registry Entries": {"color": "#52d5ff", "aliases": [], "extensions": [".reg"]},
    "Witcher Script": {"color": "#ff0000", "aliases": [], "extensions": [".ws"]},
    "Wollok": {"color": "#a23738", "aliases": [], "extensions": [".wlk"]},
    "World of Warcraft Addon Data": {"color": "#f7e43f", "aliases": [], "extensions": [".toc"]},
    "Wren": {"color": "#383838", "aliases": ["wrenlang"], "extensions": [".wren"]},
    "X10": {"color": "#4B6BEF", "aliases": ["xten"], "extensions": [".x10"]},
    "xBase": {"color": "#403a40", "aliases": ["advpl", "clipper", "foxpro"], "extensions": [".prg", ".ch", ".prw"]},
    "XC": {"color": "#99DA07", "aliases": [], "extensions": [".xc"]},
    "XML": {"color": "#0060ac", "aliases": ["rss", "xsd", "wsdl"], "extensions": [".xml", ".adml", ".admx", ".ant", ".axml", ".builds", ".ccproj", ".csproj", ".dita", ".filters", ".fsproj", ".kml", ".mxml", ".plist", ".proj", ".props", ".resx", ".rss", ".svg", ".targets", ".vbproj", ".vcxproj", ".wsdl", ".xaml", ".xlf", ".xliff", ".xsd", ".xul"]},
    "XML Property List": {"color": "#0060ac", "aliases": [], "extensions": [".plist", ".stTheme", ".tmCommand", ".tmLanguage", ".tmPreferences", ".tmSnippet", ".tmTheme"]},
    "Xojo": {"color": "#81bd41", "aliases": [], "extensions": [".xojo_code", ".xojo_menu", ".xojo_report", ".xojo_script", ".xojo_toolbar", ".xojo_window"]},
    "Xonsh": {"color": "#285EEF", "aliases": [], "extensions": [".xsh"]},
    "XQuery": {"color": "#5232e7", "aliases": [], "extensions": [".xquery", ".xq", ".xql", ".xqm", ".xqy"]},
    "XSLT": {"color": "#EB8CEB", "aliases": ["xsl"], "extensions": [".xslt", ".xsl"]},
    "Xtend": {"color": "#24255d", "aliases": [], "extensions": [".xtend"]},
    "Yacc": {"color": "#4B6C4B", "aliases": [], "extensions": [".y", ".yacc", ".yy"]},
    "YAML": {"color": "#cb171e", "aliases": ["yml"], "extensions": [".yml", ".mir", ".reek", ".rviz", ".sublime-syntax", ".syntax", ".yaml", ".yaml-tmlanguage", ".yaml.sed", ".yml.mysql"]},
    "YARA": {"color": "#220000", "aliases": [], "extensions": [".yar", ".yara"]},
    "YASnippet": {"color": "#32AB90", "aliases": ["snippet", "yas"], "extensions": [".yasnippet"]},
    "Yul": {"color": "#794932", "aliases": [], "extensions": [".yul"]},
    "ZAP": {"color": "#0d665e", "aliases": [], "extensions": [".zap", ".xzap"]},
    "ZenScript": {"color": "#00BCD1", "aliases": [], "extensions": [".zs"]},
    "Zephir": {"color": "#118f9e", "aliases": [], "extensions": [".zep"]},
    "Zig": {"color": "#ec915c", "aliases": [], "extensions": [".zig", ".zig.zon"]},
    "ZIL": {"color": "#dc75e5", "aliases": [], "extensions": [".zil", ".mud"]},
    "Zimpl": {"color": "#d67711", "aliases": [], "extensions": [".zimpl", ".zmpl", ".zpl"]},
}
